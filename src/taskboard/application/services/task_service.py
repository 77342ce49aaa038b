"""Task service: CRUD over the current user's tasks."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from taskboard.application.ports import StoreHealth, ensure_store_available
from taskboard.domain.task import Task, TaskNotFoundError, TaskPriority, TaskStatus

if TYPE_CHECKING:
    from taskboard.domain.task import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Use cases for tasks; every call is scoped to one owner."""

    def __init__(self, task_repository: TaskRepository, store_health: StoreHealth):
        self._task_repo = task_repository
        self._store_health = store_health

    async def list_tasks(
        self,
        user_id: UUID,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        search: str | None = None,
    ) -> list[Task]:
        ensure_store_available(self._store_health, "List tasks")
        return await self._task_repo.list_for_user(
            user_id,
            status=status,
            priority=priority,
            search=search or None,
        )

    async def get_task(self, user_id: UUID, task_id: UUID) -> Task:
        ensure_store_available(self._store_health, "Get task")

        task = await self._task_repo.find_by_id(user_id, task_id)
        if task is None:
            raise TaskNotFoundError(str(task_id))
        return task

    async def create_task(
        self,
        user_id: UUID,
        title: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.PENDING,
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: datetime | None = None,
    ) -> Task:
        ensure_store_available(self._store_health, "Create task")

        task = Task.create(
            user_id=user_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=due_date,
        )
        await self._task_repo.save(task)

        logger.info("Task created: %s for user %s", task.id, user_id)
        return task

    async def update_task(
        self,
        user_id: UUID,
        task_id: UUID,
        changes: dict[str, Any],
    ) -> Task:
        ensure_store_available(self._store_health, "Update task")

        task = await self._task_repo.find_by_id(user_id, task_id)
        if task is None:
            raise TaskNotFoundError(str(task_id))

        if changes:
            task.update(**changes)
            await self._task_repo.save(task)
            logger.debug("Task updated: %s (%s)", task_id, ", ".join(sorted(changes)))

        return task

    async def delete_task(self, user_id: UUID, task_id: UUID) -> None:
        ensure_store_available(self._store_health, "Delete task")

        if not await self._task_repo.delete(user_id, task_id):
            raise TaskNotFoundError(str(task_id))

        logger.info("Task deleted: %s", task_id)
