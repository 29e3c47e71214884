"""
Service layer.

Business logic services for the application.
"""

from .localized_fields import NoFieldsToUpdateError
from .project_service import ProjectService
from .task_service import TaskService
from .translation_service import ContentTranslator, TranslationResult

__all__ = [
    "ContentTranslator",
    "NoFieldsToUpdateError",
    "ProjectService",
    "TaskService",
    "TranslationResult",
]
