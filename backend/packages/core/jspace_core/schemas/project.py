"""
Project schemas.

Request and response models for project-related operations. Localized
fields are not declared here: they arrive under many historical key
names and are extracted by the update parser.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .localized import LocalizedContent


class ProjectFields(BaseModel):
    """Plain (non-localized) project fields accepted on create and update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    category: str | None = Field(default=None, min_length=1, max_length=100)
    color_code: str | None = Field(default=None, alias="colorCode", pattern=r"^#[0-9A-Fa-f]{6}$")
    is_public: bool | None = Field(default=None, alias="isPublic")
    source_lang: str | None = Field(default=None, alias="sourceLang")


class ProjectArchiveRequest(BaseModel):
    """Archive toggle request."""

    is_archived: bool


class ProjectResponse(BaseModel):
    """Project response model."""

    id: str
    name: LocalizedContent
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
    category: str
    color_code: str | None
    is_public: bool
    is_archived: bool
    is_starred: bool
    created_at: datetime
    updated_at: datetime


class ProjectListResponse(BaseModel):
    """Project list response."""

    items: list[ProjectResponse]
    total: int
