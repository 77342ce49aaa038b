from taskboard.domain.task.aggregates.task import Task

__all__ = ["Task"]
