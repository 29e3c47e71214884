"""
Database models package.

This module exports all SQLAlchemy models for the J/Space application.
"""

from .base import Base, LocalizedJSON, TimestampMixin
from .project import Project
from .task import Task, TaskPriority, TaskStatus

__all__ = [
    "Base",
    "LocalizedJSON",
    "TimestampMixin",
    "Project",
    "Task",
    "TaskPriority",
    "TaskStatus",
]
