"""Profile router for the authenticated user's own account."""

import logging

from fastapi import APIRouter

from taskboard.infrastructure.persistence.sqlalchemy import commit_session
from taskboard.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    ProfileServiceDep,
)
from taskboard.presentation.api.schemas.auth import UserResponse
from taskboard.presentation.api.schemas.common import ErrorResponse, MessageResponse
from taskboard.presentation.api.schemas.profile import (
    ProfileResponse,
    ProfileUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_AUTH_RESPONSES: dict = {
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    503: {"model": ErrorResponse, "description": "Database unavailable"},
}


@router.get("", summary="Get own profile", responses=_AUTH_RESPONSES)
async def get_profile(
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
) -> ProfileResponse:
    user = await profile_service.get_profile(current_user.id)
    return ProfileResponse(data=UserResponse.model_validate(user))


@router.put(
    "",
    summary="Update own profile",
    responses={
        **_AUTH_RESPONSES,
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> ProfileResponse:
    """Update any of ``name``, ``bio`` and ``email``; omitted fields stay as they are."""
    changes = request.model_dump(exclude_unset=True)
    user = await profile_service.update_profile(
        current_user.id,
        name=changes.get("name"),
        bio=changes.get("bio"),
        email=changes.get("email"),
    )
    await commit_session(session)

    return ProfileResponse(
        message="Profile updated successfully",
        data=UserResponse.model_validate(user),
    )


@router.delete("", summary="Delete own account", responses=_AUTH_RESPONSES)
async def delete_profile(
    current_user: CurrentUser,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Delete the account and all of its tasks.

    Tokens issued for the account are rejected from then on.
    """
    await profile_service.delete_profile(current_user.id)
    await commit_session(session)

    logger.info("Account deleted: %s", current_user.id)
    return MessageResponse(message="Profile deleted successfully")
