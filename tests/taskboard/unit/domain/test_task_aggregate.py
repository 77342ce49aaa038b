"""Unit tests for the Task aggregate."""

from uuid import uuid4

import pytest

from taskboard.domain.shared import ValidationError
from taskboard.domain.task import Task, TaskPriority, TaskStatus


class TestTaskCreate:
    def test_defaults(self):
        task = Task.create(user_id=uuid4(), title="Write tests")

        assert task.status is TaskStatus.PENDING
        assert task.priority is TaskPriority.MEDIUM
        assert task.description is None
        assert task.due_date is None
        assert task.created_at == task.updated_at

    def test_accepts_string_values(self):
        task = Task.create(
            user_id=uuid4(),
            title="Ship it",
            status="in-progress",
            priority="high",
        )

        assert task.status is TaskStatus.IN_PROGRESS
        assert task.priority is TaskPriority.HIGH

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError, match="title is required"):
            Task.create(user_id=uuid4(), title=title)


class TestTaskUpdate:
    def setup_method(self):
        self.task = Task.create(user_id=uuid4(), title="Draft", description="first")

    def test_partial_update(self):
        self.task.update(status=TaskStatus.COMPLETED)

        assert self.task.status is TaskStatus.COMPLETED
        assert self.task.title == "Draft"
        assert self.task.description == "first"

    def test_description_can_be_cleared(self):
        self.task.update(description=None)

        assert self.task.description is None

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown task fields"):
            self.task.update(user_id=uuid4())

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            self.task.update(title="")
