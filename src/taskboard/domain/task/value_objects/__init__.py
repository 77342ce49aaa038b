from taskboard.domain.task.value_objects.task_status import TaskPriority, TaskStatus

__all__ = ["TaskPriority", "TaskStatus"]
