"""Health monitor and credential store against PostgreSQL."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from taskboard.application.ports import ConnectionState
from taskboard.domain.user import EmailAlreadyExistsError
from taskboard.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from taskboard_auth import PasswordHashingService


@pytest.mark.integration
class TestPostgresHealth:
    @pytest.mark.asyncio
    async def test_connect_and_dispose(self, postgres_monitor):
        await postgres_monitor.connect()
        assert postgres_monitor.current_state() is ConnectionState.CONNECTED
        assert postgres_monitor.host != "N/A"

        await postgres_monitor.dispose()
        assert postgres_monitor.current_state() is ConnectionState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_check(self, postgres_monitor):
        assert await postgres_monitor.check() is ConnectionState.CONNECTED
        assert postgres_monitor.is_connected


@pytest.mark.integration
class TestPostgresUniqueEmail:
    @pytest.mark.asyncio
    async def test_concurrent_signups_have_one_winner(self, postgres_engine):
        session_maker = async_sessionmaker(postgres_engine, expire_on_commit=False)
        passwords = PasswordHashingService(rounds=4)

        async def signup(name: str):
            async with session_maker() as session:
                repo = UserRepositorySQLAlchemy(session, passwords)
                user = await repo.create("race@example.com", "secret12", name)
                await session.commit()
                return user

        results = await asyncio.gather(
            *(signup(f"user-{i}") for i in range(5)),
            return_exceptions=True,
        )

        assert sum(isinstance(r, EmailAlreadyExistsError) for r in results) == 4
        assert sum(not isinstance(r, BaseException) for r in results) == 1
