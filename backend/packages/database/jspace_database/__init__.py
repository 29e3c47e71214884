"""
J/Space Database Package.

SQLAlchemy models, async session management and Alembic migrations.
"""

from .models import Base

__all__ = ["Base"]
