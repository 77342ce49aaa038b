"""Taskboard Auth - generic authentication infrastructure.

This package is independent of the task domain. It handles:
- Password hashing (bcrypt)
- JWT token issuance and verification

Architecture:
    taskboard_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from taskboard_auth import JWTService, PasswordHashingService
"""

from taskboard_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from taskboard_auth.schemas import TokenPayload
from taskboard_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
