"""
Pydantic schemas for API requests and responses.
"""

from .localized import (
    LanguageUpdates,
    LocalizedContent,
    apply_updates,
    empty,
    from_single_language,
    resolve,
)
from .project import ProjectArchiveRequest, ProjectFields, ProjectListResponse, ProjectResponse
from .task import (
    TaskCreateFields,
    TaskFields,
    TaskListResponse,
    TaskResponse,
    TaskStatusRequest,
)

__all__ = [
    # Localized content
    "LanguageUpdates",
    "LocalizedContent",
    "apply_updates",
    "empty",
    "from_single_language",
    "resolve",
    # Projects
    "ProjectArchiveRequest",
    "ProjectFields",
    "ProjectListResponse",
    "ProjectResponse",
    # Tasks
    "TaskCreateFields",
    "TaskFields",
    "TaskListResponse",
    "TaskResponse",
    "TaskStatusRequest",
]
