"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from taskboard.domain.task.aggregates.task import Task
from taskboard.domain.task.value_objects import TaskPriority, TaskStatus


class TaskRepository(ABC):
    """Repository interface for Task aggregates, scoped by owner."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID, task_id: UUID) -> Optional[Task]:
        """Find a task of ``user_id`` by its ID."""

    @abstractmethod
    async def list_for_user(
        self,
        user_id: UUID,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        search: str | None = None,
    ) -> list[Task]:
        """List tasks of a user, newest first.

        ``search`` matches title or description, case-insensitively.
        """

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Save or update a task."""

    @abstractmethod
    async def delete(self, user_id: UUID, task_id: UUID) -> bool:
        """Delete a task; returns whether a task was removed."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every task of a user; returns the number removed."""
