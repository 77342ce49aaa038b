"""Shared utilities for SQLAlchemy repositories."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, DisconnectionError, InterfaceError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.shared.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

# Failures meaning "the store did not answer", as opposed to the store
# answering with an error (IntegrityError, missing table, bad SQL).
STORE_UNREACHABLE_ERRORS = (
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    TimeoutError,
    ConnectionError,
)


def is_store_unreachable(error: BaseException) -> bool:
    """Whether ``error`` means the store could not be reached.

    Other DBAPI errors only count when the dialect classified them as a
    disconnect (``connection_invalidated``).
    """
    if isinstance(error, STORE_UNREACHABLE_ERRORS):
        return True
    return isinstance(error, DBAPIError) and error.connection_invalidated


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate store connectivity failures into DatabaseUnavailableError.

    Anything else propagates unchanged and ends up as a 500.
    """
    try:
        yield
    except Exception as e:
        if not is_store_unreachable(e):
            raise
        logger.error("Database unreachable during %s: %s", operation, e)
        raise DatabaseUnavailableError(details={"operation": operation}) from e


async def commit_session(session: AsyncSession) -> None:
    """Commit the unit of work, with the same failure translation as reads."""
    with store_errors("commit"):
        await session.commit()
