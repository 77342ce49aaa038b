"""Pydantic schemas for API request/response models."""

from taskboard.presentation.api.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
)
from taskboard.presentation.api.schemas.common import (
    DatabaseStatusResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from taskboard.presentation.api.schemas.profile import (
    ProfileResponse,
    ProfileUpdateRequest,
)
from taskboard.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    "AuthData",
    "AuthResponse",
    "DatabaseStatusResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "SignupRequest",
    "TaskCreateRequest",
    "TaskEnvelope",
    "TaskListResponse",
    "TaskResponse",
    "TaskUpdateRequest",
    "UserResponse",
]
