"""Async engine construction and schema management."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from taskboard.infrastructure.persistence.sqlalchemy.models import Base
from taskboard_config.settings import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine with driver-level timeouts applied.

    - connect timeout bounds how long opening a connection may take
    - socket timeout bounds a single command
    """
    url = make_url(settings.database_url)
    connect_args: dict[str, Any] = {}
    engine_kwargs: dict[str, Any] = {}

    if url.get_backend_name() == "sqlite":
        connect_args["timeout"] = settings.database_socket_timeout_seconds
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty db
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    elif url.get_driver_name() == "asyncpg":
        connect_args["timeout"] = settings.database_connect_timeout_seconds
        connect_args["command_timeout"] = settings.database_socket_timeout_seconds

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **engine_kwargs,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")
