"""Profile service: read, update and delete the authenticated user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from taskboard.application.ports import StoreHealth, ensure_store_available
from taskboard.domain.user import EmailAlreadyExistsError, User, UserNotFoundError

if TYPE_CHECKING:
    from taskboard.domain.task import TaskRepository
    from taskboard.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Use cases around the current user's own record."""

    def __init__(
        self,
        user_repository: UserRepository,
        task_repository: TaskRepository,
        store_health: StoreHealth,
    ):
        self._user_repo = user_repository
        self._task_repo = task_repository
        self._store_health = store_health

    async def get_profile(self, user_id: UUID) -> User:
        ensure_store_available(self._store_health, "Get profile")

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def update_profile(
        self,
        user_id: UUID,
        name: str | None = None,
        bio: str | None = None,
        email: str | None = None,
    ) -> User:
        ensure_store_available(self._store_health, "Update profile")

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if email is not None and email != user.email:
            other = await self._user_repo.find_by_email(email)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsError(email)

        if user.update_profile(name=name, bio=bio, email=email):
            await self._user_repo.update(user)
            logger.info("Profile updated: %s", user.id)

        return user

    async def delete_profile(self, user_id: UUID) -> None:
        """Delete the user and every task they own.

        Tokens issued to the user stay cryptographically valid until they
        expire; they are rejected because their subject no longer resolves.
        """
        ensure_store_available(self._store_health, "Delete profile")

        removed_tasks = await self._task_repo.delete_all_for_user(user_id)
        if not await self._user_repo.delete(user_id):
            raise UserNotFoundError(str(user_id))

        logger.info("Profile deleted: %s (%d tasks removed)", user_id, removed_tasks)
