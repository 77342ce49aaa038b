from taskboard.domain.task.repositories.task_repository import TaskRepository

__all__ = ["TaskRepository"]
