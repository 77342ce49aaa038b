"""StoreHealth - the application's view of backing store connectivity.

The application never asks the database driver directly; it reads the
state published by an adapter (see
``taskboard.infrastructure.persistence.sqlalchemy.health``).
"""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from taskboard.domain.shared.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Connectivity of the backing store as reported by its driver."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTING = "disconnecting"


@runtime_checkable
class StoreHealth(Protocol):
    """Read-only handle on the current store connection state."""

    def current_state(self) -> ConnectionState: ...


def ensure_store_available(store_health: StoreHealth, operation: str) -> None:
    """Fail fast when the store is not connected.

    Raises
    ------
    DatabaseUnavailableError
        If the current state is anything but ``connected``
    """
    state = store_health.current_state()
    if state is not ConnectionState.CONNECTED:
        logger.error("%s rejected: database not connected (state=%s)", operation, state.value)
        raise DatabaseUnavailableError(details={"state": state.value, "operation": operation})
