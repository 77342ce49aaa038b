"""Task domain - the to-do items owned by users."""

from taskboard.domain.task.aggregates import Task
from taskboard.domain.task.exceptions import TaskNotFoundError
from taskboard.domain.task.repositories import TaskRepository
from taskboard.domain.task.value_objects import TaskPriority, TaskStatus

__all__ = [
    "Task",
    "TaskNotFoundError",
    "TaskPriority",
    "TaskRepository",
    "TaskStatus",
]
