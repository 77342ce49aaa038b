"""Shared application configuration package."""

from .settings import (
    Environment,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
)

__all__ = [
    "Environment",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
]
