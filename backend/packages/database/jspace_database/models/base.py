"""
Base model definitions.

Declarative base, shared mixins and column helpers for all models.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Localized values are JSONB on PostgreSQL, plain JSON elsewhere (tests)
LocalizedJSON = JSON().with_variant(JSONB(), "postgresql")


def generate_uuid() -> str:
    """Generate a new UUID string for primary keys."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base for all models."""


class TimestampMixin:
    """
    Creation and modification timestamps.

    Attributes:
        created_at: Row creation time.
        updated_at: Last modification time.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
