"""Profile schemas."""

from pydantic import BaseModel, EmailStr, Field

from taskboard.presentation.api.schemas.auth import UserResponse


class ProfileUpdateRequest(BaseModel):
    """Partial profile update; omitted fields stay unchanged."""

    name: str | None = Field(None, min_length=1, max_length=100)
    bio: str | None = Field(None, max_length=500)
    email: EmailStr | None = None


class ProfileResponse(BaseModel):
    success: bool = True
    message: str | None = None
    data: UserResponse
