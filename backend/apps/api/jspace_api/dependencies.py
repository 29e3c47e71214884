"""
FastAPI dependencies.

Provides dependency injection for database sessions, request language,
the content translator and services.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jspace_core.config import translation_config
from jspace_core.languages import Language, get_user_language
from jspace_core.services import ContentTranslator, ProjectService, TaskService
from jspace_core.services.translation_providers import create_translation_provider
from jspace_database.session import get_session


def get_request_language(
    request: Request,
    lang: Annotated[str | None, Query(description="Explicit display language")] = None,
) -> Language:
    """
    Resolve the viewer's language for this request.

    Args:
        request: Incoming request (X-Lang / Accept-Language headers).
        lang: Optional explicit override.

    Returns:
        Effective language.
    """
    return get_user_language(request.headers, override=lang)


@lru_cache
def get_content_translator() -> ContentTranslator:
    """
    Get the process-wide content translator.

    The provider is chosen once from configuration.
    """
    return ContentTranslator(create_translation_provider(translation_config.provider_settings()))


def get_auto_translate() -> bool:
    """Whether single-language edits may be machine translated."""
    return translation_config.auto_translate


# Service dependencies
def get_project_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    translator: Annotated[ContentTranslator, Depends(get_content_translator)],
    auto_translate: Annotated[bool, Depends(get_auto_translate)],
) -> ProjectService:
    """Get project service instance."""
    return ProjectService(session, translator, auto_translate)


def get_task_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    translator: Annotated[ContentTranslator, Depends(get_content_translator)],
    auto_translate: Annotated[bool, Depends(get_auto_translate)],
) -> TaskService:
    """Get task service instance."""
    return TaskService(session, translator, auto_translate)
