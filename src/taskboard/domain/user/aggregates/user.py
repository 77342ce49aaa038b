"""User aggregate (the identity behind a bearer token)."""

from datetime import datetime
from uuid import UUID

from taskboard.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    Carries the public identity only. The password hash lives solely in
    the persistence layer and is reachable through
    ``UserRepository.verify_password``, so no projection of a ``User`` can
    leak it.
    """

    def __init__(
        self,
        id: UUID,
        email: str,
        name: str,
        bio: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._email = email
        self._name = name
        self._bio = bio
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def bio(self) -> str | None:
        return self._bio

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: str | None = None,
        bio: str | None = None,
        email: str | None = None,
    ) -> bool:
        """Apply the provided fields; returns whether anything changed."""
        changed = False
        if name is not None and name != self._name:
            self._name = name
            changed = True
        if bio is not None and bio != self._bio:
            self._bio = bio
            changed = True
        if email is not None and email != self._email:
            self._email = email
            changed = True
        if changed:
            self._updated_at = utc_now()
        return changed

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: str,
        name: str,
        bio: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            bio=bio,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
