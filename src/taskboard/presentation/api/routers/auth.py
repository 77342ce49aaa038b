"""Authentication router for signup and login."""

import logging

from fastapi import APIRouter, status

from taskboard.domain.user import User
from taskboard.infrastructure.persistence.sqlalchemy import commit_session
from taskboard.presentation.api.dependencies import AuthService, DBSession
from taskboard.presentation.api.schemas.auth import (
    AuthData,
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
)
from taskboard.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(user: User, token: str, message: str) -> AuthResponse:
    return AuthResponse(
        message=message,
        data=AuthData(user=UserResponse.model_validate(user), token=token),
    )


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        503: {"model": ErrorResponse, "description": "Database unavailable"},
    },
)
async def signup(
    request: SignupRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Create an account and return it together with a fresh token.

    Two concurrent signups for the same email never both succeed: the
    unique index on email rejects the second insert with 409.
    """
    user, token = await auth_service.signup(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    await commit_session(session)

    return _create_auth_response(user, token, "User registered successfully")


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        503: {"model": ErrorResponse, "description": "Database unavailable"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same 401 response.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return _create_auth_response(user, token, "Login successful")
