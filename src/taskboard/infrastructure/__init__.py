"""Infrastructure adapters (persistence, driver health)."""
