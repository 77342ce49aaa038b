"""Task router. Every query is scoped to the authenticated user."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from taskboard.domain.task import TaskPriority, TaskStatus
from taskboard.infrastructure.persistence.sqlalchemy import commit_session
from taskboard.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    TaskServiceDep,
)
from taskboard.presentation.api.schemas.common import ErrorResponse, MessageResponse
from taskboard.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_AUTH_RESPONSES: dict = {
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    503: {"model": ErrorResponse, "description": "Database unavailable"},
}
_NOT_FOUND: dict = {404: {"model": ErrorResponse, "description": "Task not found"}}


@router.get("", summary="List tasks", responses=_AUTH_RESPONSES)
async def list_tasks(
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    status_filter: TaskStatus | None = Query(None, alias="status"),
    priority: TaskPriority | None = Query(None),
    search: str | None = Query(None, max_length=200),
) -> TaskListResponse:
    """List own tasks, newest first.

    ``search`` matches title or description, case-insensitively.
    """
    tasks = await task_service.list_tasks(
        current_user.id,
        status=status_filter,
        priority=priority,
        search=search,
    )
    return TaskListResponse(
        count=len(tasks),
        data=[TaskResponse.model_validate(task) for task in tasks],
    )


@router.get(
    "/{task_id}",
    summary="Get a task",
    responses={**_AUTH_RESPONSES, **_NOT_FOUND},
)
async def get_task(
    task_id: UUID,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
) -> TaskEnvelope:
    task = await task_service.get_task(current_user.id, task_id)
    return TaskEnvelope(data=TaskResponse.model_validate(task))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={
        **_AUTH_RESPONSES,
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
)
async def create_task(
    request: TaskCreateRequest,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> TaskEnvelope:
    task = await task_service.create_task(
        current_user.id,
        title=request.title,
        description=request.description,
        status=request.status,
        priority=request.priority,
        due_date=request.due_date,
    )
    await commit_session(session)

    return TaskEnvelope(
        message="Task created successfully",
        data=TaskResponse.model_validate(task),
    )


@router.put(
    "/{task_id}",
    summary="Update a task",
    responses={
        **_AUTH_RESPONSES,
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
)
async def update_task(
    task_id: UUID,
    request: TaskUpdateRequest,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> TaskEnvelope:
    """Apply only the fields present in the body."""
    task = await task_service.update_task(
        current_user.id,
        task_id,
        request.model_dump(exclude_unset=True),
    )
    await commit_session(session)

    return TaskEnvelope(
        message="Task updated successfully",
        data=TaskResponse.model_validate(task),
    )


@router.delete(
    "/{task_id}",
    summary="Delete a task",
    responses={**_AUTH_RESPONSES, **_NOT_FOUND},
)
async def delete_task(
    task_id: UUID,
    current_user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> MessageResponse:
    await task_service.delete_task(current_user.id, task_id)
    await commit_session(session)

    return MessageResponse(message="Task deleted successfully")
