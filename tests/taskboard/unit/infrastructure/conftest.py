"""Fixtures for persistence tests against in-memory SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.infrastructure.persistence.sqlalchemy import build_engine, create_tables
from taskboard_auth import PasswordHashingService
from taskboard_config.settings import Settings


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret_key="test-secret",
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
async def test_db_engine(memory_settings):
    """Create an in-memory SQLite database with all tables."""
    engine = build_engine(memory_settings)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)
