"""Shared domain building blocks."""

from taskboard.domain.shared.exceptions import (
    ConflictError,
    DatabaseUnavailableError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ServiceUnavailableError,
    UnauthorizedError,
    ValidationError,
)
from taskboard.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DatabaseUnavailableError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "ValidationError",
    "utc_now",
]
