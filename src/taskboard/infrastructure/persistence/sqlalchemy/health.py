"""Database health monitor.

Publishes the connection state of the async engine as one of
``disconnected``, ``connecting``, ``connected`` or ``disconnecting``.
The state is only ever written from driver lifecycle hooks (pool connect
and invalidate events, engine disconnect errors) and from the monitor's
own connect, heartbeat and dispose routines; request handlers only read it.

An optional initializer (schema creation) runs once, after the first
successful round trip and before the state first reads ``connected``.
Until it has succeeded, heartbeats retry the full connect.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from sqlalchemy import event, text
from sqlalchemy.engine import ExceptionContext
from sqlalchemy.ext.asyncio import AsyncEngine

from taskboard.application.ports import ConnectionState

logger = logging.getLogger(__name__)

EngineInitializer = Callable[[AsyncEngine], Awaitable[None]]


class DatabaseHealthMonitor:
    """Tracks live connectivity of an ``AsyncEngine``.

    Reads and writes of the state are single attribute operations, so no
    lock is involved; transitions are driven by the driver, never by
    request handlers.

    Examples
    --------
    >>> monitor = DatabaseHealthMonitor(engine, initializer=create_tables)
    >>> await monitor.connect()
    >>> monitor.current_state()
    <ConnectionState.CONNECTED: 'connected'>
    """

    DEFAULT_CONNECT_TIMEOUT = 5.0
    DEFAULT_HEARTBEAT_INTERVAL = 10.0

    def __init__(
        self,
        engine: AsyncEngine,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        heartbeat_interval: float = DEFAULT_HEARTBEAT_INTERVAL,
        initializer: EngineInitializer | None = None,
    ):
        self._engine = engine
        self._connect_timeout = connect_timeout
        self._heartbeat_interval = heartbeat_interval
        self._initializer = initializer
        self._initialized = initializer is None
        self._state = ConnectionState.DISCONNECTED
        self._attach_driver_listeners()

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def host(self) -> str:
        return self._engine.url.host or "N/A"

    @property
    def database(self) -> str:
        return self._engine.url.database or "N/A"

    @property
    def initialized(self) -> bool:
        return self._initialized

    def current_state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    async def connect(self) -> None:
        """Open and verify a connection, running the initializer if still pending.

        Raises whatever the driver or the initializer raised (or
        ``TimeoutError`` after the connect timeout) once the state has been
        set back to disconnected.
        """
        self._transition(ConnectionState.CONNECTING)
        try:
            await asyncio.wait_for(self._ping(), timeout=self._connect_timeout)
            if not self._initialized:
                await self._initializer(self._engine)
                self._initialized = True
        except BaseException:
            self._transition(ConnectionState.DISCONNECTED)
            raise
        self._transition(ConnectionState.CONNECTED)

    async def check(self) -> ConnectionState:
        """Run one heartbeat round trip and record its outcome.

        Before the initializer has succeeded, a check is a full ``connect``.
        """
        if self._state is ConnectionState.DISCONNECTING:
            return self._state

        try:
            if self._initialized:
                await asyncio.wait_for(self._ping(), timeout=self._connect_timeout)
            else:
                await self.connect()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if self._state is not ConnectionState.DISCONNECTED:
                logger.warning("Database heartbeat failed: %s", e)
            else:
                logger.debug("Database still unreachable: %s", e)
            self._transition(ConnectionState.DISCONNECTED)
        else:
            self._transition(ConnectionState.CONNECTED)

        return self._state

    async def run_heartbeat(self) -> None:
        """Check forever; reconnects after drops and detects silent loss."""
        while True:
            await asyncio.sleep(self._heartbeat_interval)
            await self.check()

    async def dispose(self) -> None:
        """Close every pooled connection."""
        self._transition(ConnectionState.DISCONNECTING)
        try:
            await self._engine.dispose()
        finally:
            self._transition(ConnectionState.DISCONNECTED)
        logger.info("Database connections closed")

    async def _ping(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    def _transition(self, new_state: ConnectionState) -> None:
        old_state = self._state
        if new_state is old_state:
            return

        self._state = new_state
        if old_state is ConnectionState.CONNECTED and new_state is ConnectionState.DISCONNECTED:
            logger.warning("Database disconnected")
        else:
            logger.info("Database state: %s -> %s", old_state.value, new_state.value)

    def _attach_driver_listeners(self) -> None:
        sync_engine = self._engine.sync_engine
        event.listen(sync_engine, "connect", self._on_pool_connect)
        event.listen(sync_engine, "invalidate", self._on_pool_invalidate)
        event.listen(sync_engine, "handle_error", self._on_engine_error)

    def _on_pool_connect(self, dbapi_connection, connection_record) -> None:
        # not usable before the initializer has run, even if the driver connects
        if self._initialized and self._state is not ConnectionState.DISCONNECTING:
            self._transition(ConnectionState.CONNECTED)

    def _on_pool_invalidate(self, dbapi_connection, connection_record, exception) -> None:
        # exception is None for deliberate invalidation (e.g. pool recycle)
        if exception is not None:
            self._transition(ConnectionState.DISCONNECTED)

    def _on_engine_error(self, context: ExceptionContext) -> None:
        if context.is_disconnect:
            self._transition(ConnectionState.DISCONNECTED)
