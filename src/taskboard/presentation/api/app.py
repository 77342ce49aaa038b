"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers, and owns the startup policy:

- the token signing secret is mandatory; without it the process exits
- the database connection is attempted in the background, so the
  listener accepts requests before the attempt resolves
- the schema is created as part of the first successful connect, so a
  database that only becomes reachable later is usable once it is
- a failed attempt is logged and tolerated, except in production where
  it stops the server with exit code 1
"""

import asyncio
import logging
import signal
import sys
from contextlib import asynccontextmanager, suppress
from functools import lru_cache, partial
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.infrastructure.persistence.sqlalchemy import (
    DatabaseHealthMonitor,
    build_engine,
    create_tables,
)
from taskboard.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from taskboard.presentation.api.routers import (
    auth_router,
    profile_router,
    status_router,
    tasks_router,
)
from taskboard_auth import JWTService, PasswordHashingService
from taskboard_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the taskboard application with:
    - Console output with timestamps and module names
    - Configurable log level for taskboard modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("taskboard").setLevel(log_level)
    logging.getLogger("taskboard_auth").setLevel(log_level)
    logging.getLogger("taskboard_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Signup and login.

**Tokens:**
- HS256 signed JWT, valid for 7 days
- Send as `Authorization: Bearer <token>` on protected routes
- Tokens of deleted accounts are rejected
""",
    },
    {
        "name": "Profile",
        "description": "Read, update and delete the authenticated account.",
    },
    {
        "name": "Tasks",
        "description": """Personal task list.

**Statuses:** `pending`, `in-progress`, `completed`

**Priorities:** `low`, `medium`, `high`
""",
    },
    {
        "name": "Health",
        "description": "Service and database health monitoring endpoints.",
    },
]


class DatabaseStartupError(RuntimeError):
    """The first database connection failed in production."""


async def establish_database_connection(
    monitor: DatabaseHealthMonitor,
    settings: Settings,
) -> None:
    """Connect to the database, then keep checking it.

    Runs as a background task started by the lifespan, so the server is
    already accepting requests while this is in progress. The monitor
    creates the schema as part of its first successful connect; after a
    failed start the heartbeat retries that connect until it succeeds.

    Raises
    ------
    DatabaseStartupError
        If the first connection attempt fails in production
    """
    try:
        await monitor.connect()
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        if settings.is_production:
            raise DatabaseStartupError(str(e)) from e
        logger.warning(
            "Continuing without a database; affected requests answer 503 "
            "until it becomes reachable",
        )
    else:
        logger.info(
            "Database connected (host=%s, database=%s)",
            monitor.host,
            monitor.database,
        )

    await monitor.run_heartbeat()


def _stop_on_fatal_startup(app: FastAPI, task: asyncio.Task) -> None:
    """Done callback of the connection task.

    A fatal startup failure asks the server for a graceful shutdown via
    SIGTERM and leaves exit code 1 on ``app.state.exit_code`` for
    ``taskboard serve``.
    """
    if task.cancelled():
        return

    exc = task.exception()
    if exc is None:
        return

    if isinstance(exc, DatabaseStartupError):
        logger.critical("Cannot run in production without a database. Shutting down.")
        app.state.exit_code = 1
        signal.raise_signal(signal.SIGTERM)
        return

    logger.error("Database connection task crashed", exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    monitor: DatabaseHealthMonitor = app.state.health_monitor

    # Startup - do not wait for the database
    logger.info(
        "Starting %s API v%s (environment: %s)...",
        settings.app_name,
        API_VERSION,
        settings.environment.value,
    )
    connection_task = asyncio.create_task(
        establish_database_connection(monitor, settings),
        name="database-connection",
    )
    connection_task.add_done_callback(partial(_stop_on_fatal_startup, app))
    yield

    # Shutdown
    logger.info("Shutting down %s API...", settings.app_name)
    connection_task.cancel()
    with suppress(asyncio.CancelledError, DatabaseStartupError):
        await connection_task
    await monitor.dispose()

    if app.state.exit_code:
        logger.critical(
            "Stopped: database unreachable at startup (environment: %s)",
            settings.environment.value,
        )


def _ensure_signing_secret(settings: Settings) -> None:
    if not settings.signing_secret:
        logger.critical(
            "JWT_SECRET_KEY is not configured. Generate one with "
            "'taskboard secrets generate' and set it in the environment.",
        )
        raise SystemExit(1)


def create_app(
    settings: Settings | None = None,
    health_monitor: DatabaseHealthMonitor | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    health_monitor
        Optional monitor override; by default one is built around a new
        engine for ``settings.database_url``.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    SystemExit
        If no token signing secret is configured.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)
    _ensure_signing_secret(settings)

    if health_monitor is None:
        health_monitor = DatabaseHealthMonitor(
            build_engine(settings),
            connect_timeout=settings.database_connect_timeout_seconds,
            heartbeat_interval=settings.database_heartbeat_seconds,
            initializer=create_tables,
        )

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Personal task management with **JWT authentication**.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.exit_code = 0
    app.state.health_monitor = health_monitor
    app.state.session_maker = async_sessionmaker(
        health_monitor.engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    app.state.jwt_service = JWTService(
        secret_key=settings.signing_secret,
        token_expire_days=settings.jwt_token_expire_days,
    )
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
        min_length=settings.password_min_length,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_exception_handlers(app)

    app.include_router(status_router, tags=["Health"])
    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    app.include_router(profile_router, prefix="/profile", tags=["Profile"])
    app.include_router(tasks_router, prefix="/tasks", tags=["Tasks"])

    return app
