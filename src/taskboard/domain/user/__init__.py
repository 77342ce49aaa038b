"""User domain - identities that can authenticate."""

from taskboard.domain.user.aggregates import User
from taskboard.domain.user.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
)
from taskboard.domain.user.repositories import UserRepository

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
