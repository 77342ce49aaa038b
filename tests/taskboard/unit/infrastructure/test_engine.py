"""Tests for engine construction."""

from unittest.mock import patch

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from taskboard.infrastructure.persistence.sqlalchemy import build_engine, create_tables
from taskboard_config.settings import Settings

ENGINE_MODULE = "taskboard.infrastructure.persistence.sqlalchemy.engine"


def _settings(database_url: str) -> Settings:
    return Settings(_env_file=None, jwt_secret_key="test-secret", database_url=database_url)


class TestBuildEngine:
    def test_memory_sqlite_uses_static_pool(self):
        engine = build_engine(_settings("sqlite+aiosqlite:///:memory:"))

        assert isinstance(engine.pool, StaticPool)

    def test_file_sqlite_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "taskboard.db"

        build_engine(_settings(f"sqlite+aiosqlite:///{db_path}"))

        assert db_path.parent.is_dir()

    def test_sqlite_socket_timeout(self):
        with patch(f"{ENGINE_MODULE}.create_async_engine") as factory:
            build_engine(_settings("sqlite+aiosqlite:///:memory:"))

        kwargs = factory.call_args.kwargs
        assert kwargs["connect_args"] == {"timeout": 45.0}
        assert kwargs["pool_pre_ping"] is True

    def test_asyncpg_timeouts(self):
        with patch(f"{ENGINE_MODULE}.create_async_engine") as factory:
            build_engine(_settings("postgresql+asyncpg://user:pw@db.internal/taskboard"))

        assert factory.call_args.kwargs["connect_args"] == {
            "timeout": 5.0,
            "command_timeout": 45.0,
        }


async def test_create_tables_is_idempotent(test_db_engine):
    await create_tables(test_db_engine)

    async with test_db_engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert {"users", "tasks"} <= set(tables)
