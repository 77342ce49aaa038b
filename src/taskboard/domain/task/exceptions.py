"""Task domain exceptions."""

from taskboard.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class TaskNotFoundError(EntityNotFoundError):
    """Task not found (or owned by another user)."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(
            "Task not found",
            ErrorCode.TASK_NOT_FOUND,
            {"task_id": task_id},
        )
