"""
Tasks router.

Provides endpoints for creating and editing tasks.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from jspace_core.languages import Language
from jspace_core.schemas import TaskResponse, TaskStatusRequest
from jspace_core.services import NoFieldsToUpdateError, TaskService

from ..dependencies import get_request_language, get_task_service
from ..errors import unprocessable

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: Annotated[dict[str, Any], Body()],
    lang: Annotated[Language, Depends(get_request_language)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a task.

    Args:
        body: Request body with ``projectId``, title/description and
            optional ``sourceLang``.
        lang: Request language.
        task_service: Task service.

    Returns:
        Created task.

    Raises:
        HTTPException: If project not found or fields are invalid.
    """
    try:
        return await task_service.create_task(body, lang, lang)
    except ValidationError as e:
        raise unprocessable(e) from None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.get("/{task_id}")
async def get_task(
    task_id: str,
    lang: Annotated[Language, Depends(get_request_language)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Get a specific task."""
    try:
        return await task_service.get_task(task_id, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.patch("/{task_id}")
async def update_task(
    task_id: str,
    body: Annotated[dict[str, Any], Body()],
    lang: Annotated[Language, Depends(get_request_language)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Partially update a task.

    A single-language title edit on an unlocked task is machine
    translated into the other languages and locks the title; edits to a
    locked title only touch the languages sent.

    Args:
        task_id: Task identifier.
        body: Request body.
        lang: Display language.
        task_service: Task service.

    Returns:
        Updated task.

    Raises:
        HTTPException: If task not found, nothing to update, or invalid fields.
    """
    try:
        return await task_service.update_task(task_id, body, lang)
    except ValidationError as e:
        raise unprocessable(e) from None
    except NoFieldsToUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.patch("/{task_id}/status")
async def update_task_status(
    task_id: str,
    data: TaskStatusRequest,
    lang: Annotated[Language, Depends(get_request_language)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Move a task to another board column."""
    try:
        return await task_service.update_status(task_id, data.status, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str,
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> None:
    """Delete a task."""
    try:
        await task_service.delete_task(task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
