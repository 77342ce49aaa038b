"""Task aggregate."""

from datetime import datetime
from typing import Any, Union
from uuid import UUID, uuid4

from taskboard.domain.shared.exceptions import ValidationError
from taskboard.domain.shared.time import utc_now
from taskboard.domain.task.value_objects import TaskPriority, TaskStatus


class Task:
    """
    Task aggregate root.

    A task always belongs to exactly one user; repositories scope every
    lookup by ``user_id``.
    """

    UPDATABLE_FIELDS = ("title", "description", "status", "priority", "due_date")

    def __init__(
        self,
        user_id: UUID,
        title: str,
        description: str | None = None,
        status: Union[str, TaskStatus] = TaskStatus.PENDING,
        priority: Union[str, TaskPriority] = TaskPriority.MEDIUM,
        due_date: datetime | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._title = self._validate_title(title)
        self._description = description
        self._status = TaskStatus(status)
        self._priority = TaskPriority(priority)
        self._due_date = due_date
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _validate_title(title: str) -> str:
        if not title or not title.strip():
            msg = "Task title is required"
            raise ValidationError(msg)
        return title

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def priority(self) -> TaskPriority:
        return self._priority

    @property
    def due_date(self) -> datetime | None:
        return self._due_date

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(self, **changes: Any) -> None:
        """Apply a partial update.

        Only keys in ``UPDATABLE_FIELDS`` are accepted; ``description`` and
        ``due_date`` may be cleared by passing ``None``.
        """
        unknown = set(changes) - set(self.UPDATABLE_FIELDS)
        if unknown:
            msg = f"Unknown task fields: {', '.join(sorted(unknown))}"
            raise ValidationError(msg)

        if "title" in changes:
            self._title = self._validate_title(changes["title"])
        if "description" in changes:
            self._description = changes["description"]
        if "status" in changes:
            self._status = TaskStatus(changes["status"])
        if "priority" in changes:
            self._priority = TaskPriority(changes["priority"])
        if "due_date" in changes:
            self._due_date = changes["due_date"]
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        user_id: UUID,
        title: str,
        description: str | None = None,
        status: Union[str, TaskStatus] = TaskStatus.PENDING,
        priority: Union[str, TaskPriority] = TaskPriority.MEDIUM,
        due_date: datetime | None = None,
    ) -> "Task":
        return cls(
            user_id=user_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=due_date,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Task(id={self._id}, title={self._title!r}, status={self._status.value})"
