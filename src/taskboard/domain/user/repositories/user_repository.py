"""User repository interface (the credential store)."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from taskboard.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates and their password hashes.

    Implementations hash the password before persisting it and must report
    a uniqueness violation on ``email`` as ``EmailAlreadyExistsError``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address (exact match)."""

    @abstractmethod
    async def create(self, email: str, password: str, name: str) -> User:
        """Persist a new user with a salted hash of ``password``.

        Raises
        ------
        EmailAlreadyExistsError
            If the store already holds a user with this email
        """

    @abstractmethod
    async def verify_password(self, user: User, candidate: str) -> bool:
        """Check ``candidate`` against the stored hash of ``user``."""

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist profile changes of an existing user."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user by ID; returns whether a user was removed."""
