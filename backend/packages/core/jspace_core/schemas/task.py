"""
Task schemas.

Request and response models for task-related operations.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jspace_database.models import TaskPriority, TaskStatus

from .localized import LocalizedContent


class TaskFields(BaseModel):
    """Plain (non-localized) task fields accepted on update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")
    deadline: datetime | None = None
    assigned_to: str | None = Field(default=None, alias="assignedTo")

    @field_validator("start_date", "end_date", "deadline", "assigned_to", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        # Forms send "" (and sometimes "null") for cleared inputs
        if value in ("", "null"):
            return None
        return value

    @field_validator("start_date", "end_date", "deadline")
    @classmethod
    def _naive_as_utc(cls, value: datetime | None) -> datetime | None:
        # Columns are timezone-aware; a bare local time is read as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def _check_date_range(self) -> "TaskFields":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must be equal to or later than start date")
        return self


class TaskCreateFields(TaskFields):
    """Plain task fields accepted on create."""

    project_id: str = Field(alias="projectId", min_length=1)
    source_lang: str | None = Field(default=None, alias="sourceLang")


class TaskStatusRequest(BaseModel):
    """Task status update request."""

    status: TaskStatus


class TaskResponse(BaseModel):
    """Task response model."""

    id: str
    project_id: str
    title: LocalizedContent
    description: LocalizedContent
    title_display: str
    description_display: str
    # Legacy mirror columns
    title_en: str | None
    title_uz: str | None
    title_jp: str | None
    desc_en: str | None
    desc_uz: str | None
    desc_jp: str | None
    status: TaskStatus
    priority: TaskPriority
    start_date: datetime | None
    end_date: datetime | None
    deadline: datetime | None
    assigned_to: str | None
    created_at: datetime
    updated_at: datetime


class TaskListResponse(BaseModel):
    """Task list response."""

    items: list[TaskResponse]
    total: int
