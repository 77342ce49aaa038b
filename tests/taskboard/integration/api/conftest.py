"""Pytest fixtures for API tests against an in-memory database."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from taskboard.presentation.api.app import create_app
from taskboard_auth import JWTService
from taskboard_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with an in-memory database."""
    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_JWT_SECRET,
        environment="test",
        database_url="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


@pytest.fixture
async def test_app(api_settings) -> FastAPI:
    """App whose database is connected; connecting creates the schema.

    The lifespan is not run; the tests drive the health monitor directly.
    """
    app = create_app(settings=api_settings)
    monitor = app.state.health_monitor
    await monitor.connect()

    yield app

    await monitor.dispose()


@pytest.fixture
async def offline_app(api_settings) -> FastAPI:
    """App whose database connection was never established."""
    app = create_app(settings=api_settings)

    yield app

    await app.state.health_monitor.dispose()


@pytest.fixture
async def client(test_app) -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def offline_client(offline_app) -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=offline_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def signup_data() -> dict:
    return {
        "email": "test@example.com",
        "password": "SecurePassword123!",
        "name": "Test User",
    }


@pytest.fixture
async def auth_headers(client, signup_data) -> dict:
    """Sign up a user and return its bearer header."""
    response = await client.post("/auth/signup", json=signup_data)
    assert response.status_code == 201

    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def jwt_service(api_settings) -> JWTService:
    """Token service sharing the app's signing secret."""
    return JWTService(secret_key=api_settings.signing_secret)
