"""SQLAlchemy persistence: models, repositories, engine and health."""

from taskboard.infrastructure.persistence.sqlalchemy.engine import (
    build_engine,
    create_tables,
)
from taskboard.infrastructure.persistence.sqlalchemy.health import (
    DatabaseHealthMonitor,
)
from taskboard.infrastructure.persistence.sqlalchemy.models import (
    Base,
    TaskModel,
    UserModel,
)
from taskboard.infrastructure.persistence.sqlalchemy.repositories import (
    TaskRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    commit_session,
)

__all__ = [
    "Base",
    "DatabaseHealthMonitor",
    "TaskModel",
    "TaskRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "build_engine",
    "commit_session",
    "create_tables",
]
