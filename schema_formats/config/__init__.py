"""Configuration module for schema-formats.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from schema_formats.config import get_settings

    settings = get_settings()

    # Access logging settings
    level = settings.logging.log_level
    debug_all = settings.logging.debug_all
"""

from schema_formats.config.settings import (
    ENV_PREFIX,
    LoggingSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "ENV_PREFIX",
    "LoggingSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
