"""Authentication service for signup, login and bearer token checks."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from taskboard.application.ports import StoreHealth, ensure_store_available
from taskboard.domain.user import EmailAlreadyExistsError, User
from taskboard_auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
)

if TYPE_CHECKING:
    from taskboard.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Every operation that reaches the store first consults ``store_health``
    and fails with ``DatabaseUnavailableError`` instead of waiting on a
    dead connection.

    - Signup: health check, duplicate pre-check, create, issue token
    - Login: health check, lookup, password check, issue token
    - Authenticate: verify token, then re-resolve its subject
    """

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        password_service: PasswordHashingService,
        store_health: StoreHealth,
    ):
        self._user_repo = user_repository
        self._jwt_service = jwt_service
        self._password_service = password_service
        self._store_health = store_health

    async def signup(
        self,
        email: str,
        password: str,
        name: str,
    ) -> tuple[User, str]:
        ensure_store_available(self._store_health, "Signup")

        # Friendly early answer only; the unique index on email decides.
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email)

        user = await self._user_repo.create(email=email, password=password, name=name)
        token = self._jwt_service.issue(user.id)

        logger.info("User signed up: %s", email)
        return user, token

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        ensure_store_available(self._store_health, "Login")

        user = await self._user_repo.find_by_email(email)
        if user is None:
            # Spend the same hashing effort as for a known email.
            await asyncio.to_thread(self._password_service.verify_against_dummy, password)
            raise InvalidCredentialsError

        if not await self._user_repo.verify_password(user, password):
            raise InvalidCredentialsError

        token = self._jwt_service.issue(user.id)

        logger.info("User logged in: %s", email)
        return user, token

    async def authenticate(self, token: str) -> User:
        """Resolve a bearer token to a live user.

        Raises
        ------
        InvalidTokenError
            If the token fails verification or its user no longer exists
        DatabaseUnavailableError
            If the store is not connected
        """
        try:
            payload = self._jwt_service.verify(token)
        except InvalidTokenError as e:
            logger.warning("Rejected bearer token: %s", e.reason)
            raise

        ensure_store_available(self._store_health, "Authentication")

        user = await self._user_repo.find_by_id(payload.subject_id)
        if user is None:
            logger.warning("Rejected bearer token: user %s no longer exists", payload.subject_id)
            raise InvalidTokenError(reason="subject no longer exists")

        return user
