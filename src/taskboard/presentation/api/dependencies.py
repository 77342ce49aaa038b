"""FastAPI dependency injection for the Taskboard API.

Provides dependencies for:
- Database sessions
- The database health monitor
- Authentication (current user from JWT)
- Service instances

Process-wide collaborators (settings, engine session maker, health monitor,
token and password services) are created once by ``create_app`` and kept
on ``app.state``; the dependencies below only read them from there.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.services import (
    AuthenticationService,
    ProfileService,
    TaskService,
)
from taskboard.domain.shared import UnauthorizedError
from taskboard.domain.user import User
from taskboard.infrastructure.persistence.sqlalchemy import (
    DatabaseHealthMonitor,
    TaskRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from taskboard_auth import JWTService, PasswordHashingService
from taskboard_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Application State
# -----------------------------------------------------------------------------


def get_api_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_health_monitor(request: Request) -> DatabaseHealthMonitor:
    return request.app.state.health_monitor


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


SettingsDep = Annotated[Settings, Depends(get_api_settings)]
HealthMonitorDep = Annotated[DatabaseHealthMonitor, Depends(get_health_monitor)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    No connection is checked out until the session first talks to the
    database, so requests rejected by the health check never touch it.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
    monitor: HealthMonitorDep,
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates signup, login and bearer token resolution.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session, password_service),
        jwt_service=jwt_service,
        password_service=password_service,
        store_health=monitor,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_profile_service(
    session: DBSession,
    password_service: PasswordServiceDep,
    monitor: HealthMonitorDep,
) -> ProfileService:
    return ProfileService(
        user_repository=UserRepositorySQLAlchemy(session, password_service),
        task_repository=TaskRepositorySQLAlchemy(session),
        store_health=monitor,
    )


ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


async def get_task_service(
    session: DBSession,
    monitor: HealthMonitorDep,
) -> TaskService:
    return TaskService(
        task_repository=TaskRepositorySQLAlchemy(session),
        store_health=monitor,
    )


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    request: Request,
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts the bearer token from the Authorization header, verifies it
    and re-resolves its subject, so tokens of deleted users stop working.
    The user is also attached to ``request.state.user``.

    Parameters
    ----------
    request
        Incoming request
    auth_service
        Authentication service used for verification and lookup
    credentials
        Bearer token from Authorization header

    Returns
    -------
    The authenticated User

    Raises
    ------
    UnauthorizedError
        If no bearer token is present (401)
    InvalidTokenError
        If the token is invalid, expired, or its user no longer exists (401)
    DatabaseUnavailableError
        If the database is not connected (503)
    """
    if credentials is None:
        raise UnauthorizedError()

    user = await auth_service.authenticate(credentials.credentials)
    request.state.user = user
    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]
