from taskboard.application.ports.store_health import (
    ConnectionState,
    StoreHealth,
    ensure_store_available,
)

__all__ = ["ConnectionState", "StoreHealth", "ensure_store_available"]
