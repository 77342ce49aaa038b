"""Task schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskboard.domain.task import TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    """Request schema for creating a task."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Write release notes",
                "description": "Summarize the changes since the last release",
                "status": "pending",
                "priority": "high",
                "due_date": "2025-02-01T09:00:00Z",
            },
        },
    )


class TaskUpdateRequest(BaseModel):
    """Partial task update; only fields present in the body are applied."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = None


class TaskResponse(BaseModel):
    id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    due_date: datetime | None = None
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskEnvelope(BaseModel):
    success: bool = True
    message: str | None = None
    data: TaskResponse


class TaskListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[TaskResponse]
