"""
Project model definition.

This module defines the Project model. Its name and description are
localized JSON values mirrored into legacy per-language columns.
"""

from typing import Any

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, LocalizedJSON, TimestampMixin, generate_uuid


class Project(Base, TimestampMixin):
    """
    Project model.

    Attributes:
        id: Unique project identifier (UUID).
        name: Localized project name ({en, uz, ja, translation_locked}).
        description: Localized project description.
        title_en: Legacy mirror of name.en.
        title_uz: Legacy mirror of name.uz.
        title_jp: Legacy mirror of name.ja.
        desc_en: Legacy mirror of description.en.
        desc_uz: Legacy mirror of description.uz.
        desc_jp: Legacy mirror of description.ja.
        category: Free-form category label.
        color_code: Hex color shown on project cards.
        is_public: Whether the project is visible outside its members.
        is_archived: Archived projects are hidden from the main list.
        is_starred: Starred projects are listed first.
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)

    # Localized values
    name: Mapped[dict[str, Any] | None] = mapped_column(LocalizedJSON)
    description: Mapped[dict[str, Any] | None] = mapped_column(LocalizedJSON)

    # Legacy mirror columns
    title_en: Mapped[str | None] = mapped_column(String(500))
    title_uz: Mapped[str | None] = mapped_column(String(500))
    title_jp: Mapped[str | None] = mapped_column(String(500))
    desc_en: Mapped[str | None] = mapped_column(Text)
    desc_uz: Mapped[str | None] = mapped_column(Text)
    desc_jp: Mapped[str | None] = mapped_column(Text)

    category: Mapped[str] = mapped_column(String(100), default="General", nullable=False)
    color_code: Mapped[str | None] = mapped_column(String(7))
    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_starred: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    tasks = relationship(
        "Task", back_populates="project", cascade="all, delete-orphan"
    )
