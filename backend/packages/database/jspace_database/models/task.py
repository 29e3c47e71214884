"""
Task model definition.

This module defines the Task model. Its title and description are
localized JSON values mirrored into legacy per-language columns.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, LocalizedJSON, TimestampMixin, generate_uuid


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    REVIEWED = "reviewed"


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


class Task(Base, TimestampMixin):
    """
    Task model.

    Attributes:
        id: Unique task identifier (UUID).
        project_id: Parent project reference.
        title: Localized task title.
        description: Localized task description.
        title_en: Legacy mirror of title.en.
        title_uz: Legacy mirror of title.uz.
        title_jp: Legacy mirror of title.ja.
        desc_en: Legacy mirror of description.en.
        desc_uz: Legacy mirror of description.uz.
        desc_jp: Legacy mirror of description.ja.
        status: Board column.
        priority: Task priority.
        start_date: Planned start.
        end_date: Planned end.
        deadline: Hard deadline.
        assigned_to: Assignee user ID.
    """

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    project_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Localized values
    title: Mapped[dict[str, Any] | None] = mapped_column(LocalizedJSON)
    description: Mapped[dict[str, Any] | None] = mapped_column(LocalizedJSON)

    # Legacy mirror columns
    title_en: Mapped[str | None] = mapped_column(String(500))
    title_uz: Mapped[str | None] = mapped_column(String(500))
    title_jp: Mapped[str | None] = mapped_column(String(500))
    desc_en: Mapped[str | None] = mapped_column(Text)
    desc_uz: Mapped[str | None] = mapped_column(Text)
    desc_jp: Mapped[str | None] = mapped_column(Text)

    status: Mapped[TaskStatus] = mapped_column(
        String(20), default=TaskStatus.TODO.value, nullable=False
    )
    priority: Mapped[TaskPriority] = mapped_column(
        String(10), default=TaskPriority.MID.value, nullable=False
    )
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    deadline: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    assigned_to: Mapped[str | None] = mapped_column(String(36))

    # Relationships
    project = relationship("Project", back_populates="tasks")
