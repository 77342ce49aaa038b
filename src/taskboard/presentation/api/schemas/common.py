"""Common schemas shared across API endpoints."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    errors: list[str] | None = Field(
        None,
        description="Individual validation messages (validation errors only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Invalid or expired token",
                "code": "INVALID_TOKEN",
            },
        },
    )


class MessageResponse(BaseModel):
    """Success envelope without payload."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    environment: str


class DatabaseStatusResponse(BaseModel):
    """Database connection status as seen by the health monitor."""

    connected: bool
    state: str = Field(
        ...,
        description="One of disconnected, connecting, connected, disconnecting",
    )
    host: str
    database: str
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "connected": True,
                "state": "connected",
                "host": "localhost",
                "database": "taskboard",
                "message": "Database is connected and ready",
                "timestamp": "2025-01-01T12:00:00Z",
            },
        },
    )
