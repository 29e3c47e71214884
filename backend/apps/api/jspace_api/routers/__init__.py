"""
API router modules.

This package contains all API route handlers organized by domain.
"""

from . import projects, tasks

__all__ = ["projects", "tasks"]
