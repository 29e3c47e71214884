"""
Projects router.

Provides endpoints for creating, reading and editing projects. Create
and update bodies are free-form: localized fields may be sent under any
of their historical key names.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from jspace_core.languages import Language
from jspace_core.schemas import (
    ProjectArchiveRequest,
    ProjectListResponse,
    ProjectResponse,
    TaskListResponse,
)
from jspace_core.services import NoFieldsToUpdateError, ProjectService, TaskService

from ..dependencies import get_project_service, get_request_language, get_task_service
from ..errors import unprocessable

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: Annotated[dict[str, Any], Body()],
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """
    Create a project.

    The name and description are written in one language (``sourceLang``
    or the request language) and machine translated into the others.

    Args:
        body: Request body.
        lang: Request language.
        project_service: Project service.

    Returns:
        Created project.
    """
    try:
        return await project_service.create_project(body, lang, lang)
    except ValidationError as e:
        raise unprocessable(e) from None


@router.get("")
async def list_projects(
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectListResponse:
    """
    Get active projects, starred first.

    Args:
        lang: Display language.
        project_service: Project service.

    Returns:
        Project list.
    """
    items = await project_service.list_projects(lang)
    return ProjectListResponse(items=items, total=len(items))


@router.get("/archived")
async def list_archived_projects(
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectListResponse:
    """Get archived projects."""
    items = await project_service.list_projects(lang, archived=True)
    return ProjectListResponse(items=items, total=len(items))


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """
    Get a specific project.

    Raises:
        HTTPException: If project not found.
    """
    try:
        return await project_service.get_project(project_id, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.patch("/{project_id}")
async def update_project(
    project_id: str,
    body: Annotated[dict[str, Any], Body()],
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """
    Partially update a project.

    Args:
        project_id: Project identifier.
        body: Request body.
        lang: Display language.
        project_service: Project service.

    Returns:
        Updated project.

    Raises:
        HTTPException: If project not found, nothing to update, or invalid fields.
    """
    try:
        return await project_service.update_project(project_id, body, lang)
    except ValidationError as e:
        raise unprocessable(e) from None
    except NoFieldsToUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.patch("/{project_id}/archive")
async def set_project_archived(
    project_id: str,
    data: ProjectArchiveRequest,
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """Archive or unarchive a project."""
    try:
        return await project_service.set_archived(project_id, data.is_archived, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("/{project_id}/star")
async def toggle_project_star(
    project_id: str,
    lang: Annotated[Language, Depends(get_request_language)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> ProjectResponse:
    """Star or unstar a project."""
    try:
        return await project_service.toggle_star(project_id, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    project_service: Annotated[ProjectService, Depends(get_project_service)],
) -> None:
    """
    Permanently delete a project and its tasks.

    Raises:
        HTTPException: If project not found.
    """
    try:
        await project_service.delete_project(project_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.get("/{project_id}/tasks")
async def list_project_tasks(
    project_id: str,
    lang: Annotated[Language, Depends(get_request_language)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskListResponse:
    """
    Get a project's tasks, newest first.

    Raises:
        HTTPException: If project not found.
    """
    try:
        items = await task_service.list_tasks(project_id, lang)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return TaskListResponse(items=items, total=len(items))
