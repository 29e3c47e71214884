"""
Task service.

Task CRUD with trilingual title and description fields.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jspace_core.languages import Language, coerce_language
from jspace_core.logging_config import get_logger
from jspace_core.schemas import TaskCreateFields, TaskFields, TaskResponse, resolve
from jspace_core.services.localized_fields import (
    TASK_DESCRIPTION,
    TASK_TITLE,
    NoFieldsToUpdateError,
    create_localized_field,
    update_localized_field,
)
from jspace_core.services.translation_service import ContentTranslator
from jspace_core.services.update_parser import extract_first_language_updates
from jspace_database.models import Project, Task, TaskPriority, TaskStatus

logger = get_logger(__name__)

DEFAULT_TASK_TITLE = "Untitled Task"

_TITLE_PREFIXES = ("title",)
_DESCRIPTION_PREFIXES = ("description", "desc")

# Plain columns that cannot be null
_REQUIRED_FIELDS = frozenset({"status", "priority"})


class TaskService:
    """Task management service."""

    def __init__(
        self,
        session: AsyncSession,
        translator: ContentTranslator,
        auto_translate: bool = True,
    ) -> None:
        """
        Initialize task service.

        Args:
            session: Database session.
            translator: Content translator for localized fields.
            auto_translate: Whether single-language edits may be machine translated.
        """
        self.session = session
        self.translator = translator
        self.auto_translate = auto_translate

    async def create_task(
        self, body: dict[str, Any], source_lang: Language, viewer_lang: Language
    ) -> TaskResponse:
        """
        Create a task from a free-form request body.

        The title and description are seeded in the source language and
        machine translated into the others.

        Args:
            body: Request body (must carry ``projectId``).
            source_lang: Language of the user's input, unless the body
                carries ``sourceLang``.
            viewer_lang: Language used for display strings.

        Returns:
            Created task.

        Raises:
            ValueError: If the project does not exist.
            pydantic.ValidationError: If plain fields are invalid.
        """
        fields = TaskCreateFields.model_validate(body)
        lang = fields.source_lang or source_lang

        result = await self.session.execute(select(Project.id).where(Project.id == fields.project_id))
        if result.scalar_one_or_none() is None:
            raise ValueError("Project not found")

        task = Task(
            project_id=fields.project_id,
            status=(fields.status or TaskStatus.TODO).value,
            priority=(fields.priority or TaskPriority.MID).value,
            start_date=fields.start_date,
            end_date=fields.end_date,
            deadline=fields.deadline,
            assigned_to=fields.assigned_to,
        )
        await create_localized_field(
            self.translator,
            task,
            TASK_TITLE,
            extract_first_language_updates(body, _TITLE_PREFIXES),
            lang,
            default=DEFAULT_TASK_TITLE,
        )
        await create_localized_field(
            self.translator,
            task,
            TASK_DESCRIPTION,
            extract_first_language_updates(body, _DESCRIPTION_PREFIXES),
            lang,
        )

        self.session.add(task)
        await self.session.commit()
        await self.session.refresh(task)

        logger.info(
            "Task created",
            extra={
                "task_id": task.id,
                "project_id": task.project_id,
                "source_lang": coerce_language(lang).value,
            },
        )
        return self._to_response(task, viewer_lang)

    async def list_tasks(self, project_id: str, viewer_lang: Language) -> list[TaskResponse]:
        """
        List a project's tasks, newest first.

        Raises:
            ValueError: If the project does not exist.
        """
        project = await self.session.execute(select(Project.id).where(Project.id == project_id))
        if project.scalar_one_or_none() is None:
            raise ValueError("Project not found")

        stmt = (
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(Task.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_response(t, viewer_lang) for t in result.scalars().all()]

    async def get_task(self, task_id: str, viewer_lang: Language) -> TaskResponse:
        """
        Get a task.

        Raises:
            ValueError: If task not found.
        """
        task = await self._get_or_raise(task_id)
        return self._to_response(task, viewer_lang)

    async def update_task(
        self, task_id: str, body: dict[str, Any], viewer_lang: Language
    ) -> TaskResponse:
        """
        Apply a partial update.

        Args:
            task_id: Task identifier.
            body: Request body.
            viewer_lang: Language used for display strings.

        Returns:
            Updated task.

        Raises:
            ValueError: If task not found.
            NoFieldsToUpdateError: If the body changes nothing.
            pydantic.ValidationError: If plain fields are invalid.
        """
        task = await self._get_or_raise(task_id)
        fields = TaskFields.model_validate(body)
        changed = False

        title_updates = extract_first_language_updates(body, _TITLE_PREFIXES)
        if title_updates is not None:
            await update_localized_field(
                self.translator, task, TASK_TITLE, title_updates, self.auto_translate
            )
            changed = True

        description_updates = extract_first_language_updates(body, _DESCRIPTION_PREFIXES)
        if description_updates is not None:
            await update_localized_field(
                self.translator, task, TASK_DESCRIPTION, description_updates, self.auto_translate
            )
            changed = True

        for name in sorted(fields.model_fields_set):
            value = getattr(fields, name)
            if value is None and name in _REQUIRED_FIELDS:
                continue
            if isinstance(value, (TaskStatus, TaskPriority)):
                value = value.value
            setattr(task, name, value)
            changed = True

        if not changed:
            raise NoFieldsToUpdateError("No fields to update")

        await self.session.commit()
        await self.session.refresh(task)
        return self._to_response(task, viewer_lang)

    async def update_status(
        self, task_id: str, status: TaskStatus, viewer_lang: Language
    ) -> TaskResponse:
        """
        Move a task to another board column.

        Raises:
            ValueError: If task not found.
        """
        task = await self._get_or_raise(task_id)
        task.status = status.value
        await self.session.commit()
        await self.session.refresh(task)
        return self._to_response(task, viewer_lang)

    async def delete_task(self, task_id: str) -> None:
        """
        Delete a task.

        Raises:
            ValueError: If task not found.
        """
        task = await self._get_or_raise(task_id)
        await self.session.delete(task)
        await self.session.commit()

    async def _get_or_raise(self, task_id: str) -> Task:
        result = await self.session.execute(select(Task).where(Task.id == task_id))
        task = result.scalar_one_or_none()
        if not task:
            raise ValueError("Task not found")
        return task

    @staticmethod
    def _to_response(task: Task, viewer_lang: Language) -> TaskResponse:
        title = TASK_TITLE.read(task)
        description = TASK_DESCRIPTION.read(task)
        return TaskResponse(
            id=task.id,
            project_id=task.project_id,
            title=title,
            description=description,
            title_display=resolve(title, viewer_lang),
            description_display=resolve(description, viewer_lang),
            title_en=task.title_en,
            title_uz=task.title_uz,
            title_jp=task.title_jp,
            desc_en=task.desc_en,
            desc_uz=task.desc_uz,
            desc_jp=task.desc_jp,
            status=task.status,
            priority=task.priority,
            start_date=task.start_date,
            end_date=task.end_date,
            deadline=task.deadline,
            assigned_to=task.assigned_to,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
