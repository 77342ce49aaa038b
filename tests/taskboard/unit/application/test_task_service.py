"""Unit tests for TaskService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from taskboard.application.ports import ConnectionState
from taskboard.application.services import TaskService
from taskboard.domain.shared import DatabaseUnavailableError
from taskboard.domain.task import Task, TaskNotFoundError, TaskPriority, TaskStatus


class StubStoreHealth:
    def __init__(self, state: ConnectionState = ConnectionState.CONNECTED):
        self.state = state

    def current_state(self) -> ConnectionState:
        return self.state


class TestTaskService:
    def setup_method(self):
        self.task_repo = AsyncMock()
        self.store_health = StubStoreHealth()
        self.user_id = uuid4()

        self.service = TaskService(
            task_repository=self.task_repo,
            store_health=self.store_health,
        )

    @pytest.mark.asyncio
    async def test_create_task_saves(self):
        task = await self.service.create_task(
            self.user_id,
            title="Write docs",
            priority=TaskPriority.HIGH,
        )

        assert task.user_id == self.user_id
        assert task.status is TaskStatus.PENDING
        assert task.priority is TaskPriority.HIGH
        self.task_repo.save.assert_awaited_once_with(task)

    @pytest.mark.asyncio
    async def test_list_tasks_passes_filters(self):
        self.task_repo.list_for_user.return_value = []

        await self.service.list_tasks(
            self.user_id,
            status=TaskStatus.COMPLETED,
            search="",
        )

        self.task_repo.list_for_user.assert_awaited_once_with(
            self.user_id,
            status=TaskStatus.COMPLETED,
            priority=None,
            search=None,
        )

    @pytest.mark.asyncio
    async def test_get_task_of_other_user_not_found(self):
        self.task_repo.find_by_id.return_value = None

        with pytest.raises(TaskNotFoundError):
            await self.service.get_task(self.user_id, uuid4())

    @pytest.mark.asyncio
    async def test_update_task_applies_changes(self):
        task = Task.create(user_id=self.user_id, title="Draft")
        self.task_repo.find_by_id.return_value = task

        updated = await self.service.update_task(
            self.user_id,
            task.id,
            {"status": TaskStatus.IN_PROGRESS},
        )

        assert updated.status is TaskStatus.IN_PROGRESS
        self.task_repo.save.assert_awaited_once_with(task)

    @pytest.mark.asyncio
    async def test_update_task_without_changes_skips_write(self):
        task = Task.create(user_id=self.user_id, title="Draft")
        self.task_repo.find_by_id.return_value = task

        await self.service.update_task(self.user_id, task.id, {})

        self.task_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_missing_task(self):
        self.task_repo.delete.return_value = False

        with pytest.raises(TaskNotFoundError):
            await self.service.delete_task(self.user_id, uuid4())

    @pytest.mark.asyncio
    async def test_store_unavailable(self):
        self.store_health.state = ConnectionState.DISCONNECTED

        with pytest.raises(DatabaseUnavailableError):
            await self.service.create_task(self.user_id, title="Offline")

        self.task_repo.save.assert_not_called()
