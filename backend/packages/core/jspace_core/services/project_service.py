"""
Project service.

Project CRUD with trilingual name and description fields.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jspace_core.languages import Language
from jspace_core.logging_config import get_logger
from jspace_core.schemas import ProjectFields, ProjectResponse, resolve
from jspace_core.services.localized_fields import (
    PROJECT_DESCRIPTION,
    PROJECT_NAME,
    NoFieldsToUpdateError,
    create_localized_field,
    update_localized_field,
)
from jspace_core.services.translation_service import ContentTranslator
from jspace_core.services.update_parser import extract_first_language_updates
from jspace_database.models import Project

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME = "New Project"

# Body prefixes, current name first
_NAME_PREFIXES = ("title", "name")
_DESCRIPTION_PREFIXES = ("description", "desc")


class ProjectService:
    """Project management service."""

    def __init__(
        self,
        session: AsyncSession,
        translator: ContentTranslator,
        auto_translate: bool = True,
    ) -> None:
        """
        Initialize project service.

        Args:
            session: Database session.
            translator: Content translator for localized fields.
            auto_translate: Whether single-language edits may be machine translated.
        """
        self.session = session
        self.translator = translator
        self.auto_translate = auto_translate

    async def create_project(
        self, body: dict[str, Any], source_lang: Language, viewer_lang: Language
    ) -> ProjectResponse:
        """
        Create a project from a free-form request body.

        Args:
            body: Request body.
            source_lang: Language of the user's input, unless the body
                carries ``sourceLang``.
            viewer_lang: Language used for display strings.

        Returns:
            Created project.

        Raises:
            pydantic.ValidationError: If plain fields are invalid.
        """
        fields = ProjectFields.model_validate(body)
        lang = fields.source_lang or source_lang

        project = Project(
            category=fields.category or "General",
            color_code=fields.color_code,
            is_public=bool(fields.is_public),
        )
        await create_localized_field(
            self.translator,
            project,
            PROJECT_NAME,
            extract_first_language_updates(body, _NAME_PREFIXES),
            lang,
            default=DEFAULT_PROJECT_NAME,
        )
        await create_localized_field(
            self.translator,
            project,
            PROJECT_DESCRIPTION,
            extract_first_language_updates(body, _DESCRIPTION_PREFIXES),
            lang,
        )

        self.session.add(project)
        await self.session.commit()
        await self.session.refresh(project)

        logger.info("Project created", extra={"project_id": project.id})
        return self._to_response(project, viewer_lang)

    async def list_projects(
        self, viewer_lang: Language, archived: bool = False
    ) -> list[ProjectResponse]:
        """
        List projects.

        Active projects are ordered starred first, then newest first;
        archived projects by most recently changed.

        Args:
            viewer_lang: Language used for display strings.
            archived: List archived instead of active projects.

        Returns:
            Project responses.
        """
        stmt = select(Project).where(Project.is_archived == archived)
        if archived:
            stmt = stmt.order_by(Project.updated_at.desc())
        else:
            stmt = stmt.order_by(Project.is_starred.desc(), Project.created_at.desc())

        result = await self.session.execute(stmt)
        return [self._to_response(p, viewer_lang) for p in result.scalars().all()]

    async def get_project(self, project_id: str, viewer_lang: Language) -> ProjectResponse:
        """
        Get a project.

        Raises:
            ValueError: If project not found.
        """
        project = await self._get_or_raise(project_id)
        return self._to_response(project, viewer_lang)

    async def update_project(
        self, project_id: str, body: dict[str, Any], viewer_lang: Language
    ) -> ProjectResponse:
        """
        Apply a partial update.

        Localized fields go through the translator; plain fields present in
        the body are applied as-is.

        Args:
            project_id: Project identifier.
            body: Request body.
            viewer_lang: Language used for display strings.

        Returns:
            Updated project.

        Raises:
            ValueError: If project not found.
            NoFieldsToUpdateError: If the body changes nothing.
            pydantic.ValidationError: If plain fields are invalid.
        """
        project = await self._get_or_raise(project_id)
        fields = ProjectFields.model_validate(body)
        changed = False

        name_updates = extract_first_language_updates(body, _NAME_PREFIXES)
        if name_updates is not None:
            await update_localized_field(
                self.translator, project, PROJECT_NAME, name_updates, self.auto_translate
            )
            changed = True

        description_updates = extract_first_language_updates(body, _DESCRIPTION_PREFIXES)
        if description_updates is not None:
            await update_localized_field(
                self.translator,
                project,
                PROJECT_DESCRIPTION,
                description_updates,
                self.auto_translate,
            )
            changed = True

        for name in ("category", "color_code", "is_public"):
            value = getattr(fields, name)
            if name in fields.model_fields_set and value is not None:
                setattr(project, name, value)
                changed = True

        if not changed:
            raise NoFieldsToUpdateError("No fields to update")

        await self.session.commit()
        await self.session.refresh(project)
        return self._to_response(project, viewer_lang)

    async def set_archived(
        self, project_id: str, archived: bool, viewer_lang: Language
    ) -> ProjectResponse:
        """Archive or unarchive a project."""
        project = await self._get_or_raise(project_id)
        project.is_archived = archived
        await self.session.commit()
        await self.session.refresh(project)
        return self._to_response(project, viewer_lang)

    async def toggle_star(self, project_id: str, viewer_lang: Language) -> ProjectResponse:
        """Flip the starred flag of a project."""
        project = await self._get_or_raise(project_id)
        project.is_starred = not project.is_starred
        await self.session.commit()
        await self.session.refresh(project)
        return self._to_response(project, viewer_lang)

    async def delete_project(self, project_id: str) -> None:
        """
        Delete a project and its tasks.

        Raises:
            ValueError: If project not found.
        """
        project = await self._get_or_raise(project_id)
        await self.session.delete(project)
        await self.session.commit()
        logger.info("Project deleted", extra={"project_id": project_id})

    async def _get_or_raise(self, project_id: str) -> Project:
        result = await self.session.execute(select(Project).where(Project.id == project_id))
        project = result.scalar_one_or_none()
        if not project:
            raise ValueError("Project not found")
        return project

    @staticmethod
    def _to_response(project: Project, viewer_lang: Language) -> ProjectResponse:
        name = PROJECT_NAME.read(project)
        description = PROJECT_DESCRIPTION.read(project)
        return ProjectResponse(
            id=project.id,
            name=name,
            description=description,
            title_display=resolve(name, viewer_lang),
            description_display=resolve(description, viewer_lang),
            title_en=project.title_en,
            title_uz=project.title_uz,
            title_jp=project.title_jp,
            desc_en=project.desc_en,
            desc_uz=project.desc_uz,
            desc_jp=project.desc_jp,
            category=project.category,
            color_code=project.color_code,
            is_public=project.is_public,
            is_archived=project.is_archived,
            is_starred=project.is_starred,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
