"""SQLAlchemy models; importing this package registers every table on Base."""

from taskboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from taskboard.infrastructure.persistence.sqlalchemy.models.task_model import TaskModel
from taskboard.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["Base", "TaskModel", "TimestampMixin", "UserModel"]
