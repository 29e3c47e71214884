"""
HTTP error helpers.
"""

from fastapi import HTTPException, status
from pydantic import ValidationError


def unprocessable(e: ValidationError) -> HTTPException:
    """Map a service-level validation error to a 422 response."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=e.errors(include_url=False, include_context=False, include_input=False),
    )
