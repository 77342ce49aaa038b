"""SQLAlchemy implementation of TaskRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.shared.time import ensure_tz_aware
from taskboard.domain.task import Task, TaskPriority, TaskRepository, TaskStatus
from taskboard.infrastructure.persistence.sqlalchemy.models import TaskModel
from taskboard.infrastructure.persistence.sqlalchemy.repositories._utils import (
    store_errors,
)

logger = logging.getLogger(__name__)


class TaskRepositorySQLAlchemy(TaskRepository):
    """SQLAlchemy implementation of the TaskRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID, task_id: UUID) -> Task | None:
        with store_errors("task lookup"):
            model = await self._find_model(user_id, task_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_for_user(
        self,
        user_id: UUID,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        search: str | None = None,
    ) -> list[Task]:
        stmt = select(TaskModel).where(TaskModel.user_id == user_id)

        if status is not None:
            stmt = stmt.where(TaskModel.status == status.value)
        if priority is not None:
            stmt = stmt.where(TaskModel.priority == priority.value)
        if search:
            stmt = stmt.where(
                or_(
                    TaskModel.title.icontains(search, autoescape=True),
                    TaskModel.description.icontains(search, autoescape=True),
                ),
            )

        stmt = stmt.order_by(TaskModel.created_at.desc())

        with store_errors("task listing"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def save(self, task: Task) -> None:
        with store_errors("task save"):
            existing = await self._find_model(task.user_id, task.id)

            if existing:
                self._update_model(existing, task)
                logger.debug("Updated task: %s", task.id)
            else:
                self._session.add(self._map_to_model(task))
                logger.debug("Created task: %s", task.id)

            await self._session.flush()

    async def delete(self, user_id: UUID, task_id: UUID) -> bool:
        with store_errors("task delete"):
            model = await self._find_model(user_id, task_id)
            if model is None:
                return False

            await self._session.delete(model)
            await self._session.flush()

        return True

    async def delete_all_for_user(self, user_id: UUID) -> int:
        stmt = delete(TaskModel).where(TaskModel.user_id == user_id)
        with store_errors("task bulk delete"):
            result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def _find_model(self, user_id: UUID, task_id: UUID) -> TaskModel | None:
        stmt = select(TaskModel).where(
            TaskModel.id == task_id,
            TaskModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            status=model.status,
            priority=model.priority,
            due_date=ensure_tz_aware(model.due_date) if model.due_date else None,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def _update_model(self, model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.status = task.status.value
        model.priority = task.priority.value
        model.due_date = task.due_date
        model.updated_at = task.updated_at
