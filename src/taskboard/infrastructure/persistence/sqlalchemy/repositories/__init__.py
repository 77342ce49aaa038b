from taskboard.infrastructure.persistence.sqlalchemy.repositories._utils import (
    commit_session,
    store_errors,
)
from taskboard.infrastructure.persistence.sqlalchemy.repositories.task_repository import (
    TaskRepositorySQLAlchemy,
)
from taskboard.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "TaskRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "commit_session",
    "store_errors",
]
