"""SQLAlchemy implementation of UserRepository."""

import asyncio
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.shared.time import ensure_tz_aware
from taskboard.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from taskboard.infrastructure.persistence.sqlalchemy.models import UserModel
from taskboard.infrastructure.persistence.sqlalchemy.repositories._utils import (
    store_errors,
)
from taskboard_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Hashing and verification run in a worker thread so bcrypt does not
    stall the event loop.
    """

    def __init__(
        self,
        session: AsyncSession,
        password_service: PasswordHashingService,
    ) -> None:
        self._session = session
        self._password_service = password_service

    async def find_by_id(self, user_id: UUID) -> User | None:
        with store_errors("user lookup by id"):
            model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        with store_errors("user lookup by email"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, email: str, password: str, name: str) -> User:
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        model = UserModel(email=email, name=name, password_hash=password_hash)
        self._session.add(model)

        try:
            with store_errors("user insert"):
                await self._session.flush()
        except IntegrityError as e:
            # email is the only unique column besides the generated primary key
            await self._session.rollback()
            logger.info("Duplicate signup rejected by unique index: %s", email)
            raise EmailAlreadyExistsError(email) from e

        logger.info("Created user: %s (email: %s)", model.id, email)
        return self._map_to_domain(model)

    async def verify_password(self, user: User, candidate: str) -> bool:
        with store_errors("credential lookup"):
            model = await self._find_model_by_id(user.id)

        if model is None:
            return await asyncio.to_thread(
                self._password_service.verify_against_dummy,
                candidate,
            )

        return await asyncio.to_thread(
            self._password_service.verify,
            candidate,
            model.password_hash,
        )

    async def update(self, user: User) -> None:
        with store_errors("user lookup by id"):
            model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(str(user.id))

        model.email = user.email
        model.name = user.name
        model.bio = user.bio
        model.updated_at = user.updated_at

        try:
            with store_errors("user update"):
                await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise EmailAlreadyExistsError(user.email) from e

        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: UUID) -> bool:
        with store_errors("user delete"):
            model = await self._find_model_by_id(user_id)
            if model is None:
                return False

            await self._session.delete(model)
            await self._session.flush()

        logger.info("Deleted user: %s", user_id)
        return True

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            name=model.name,
            bio=model.bio,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
