"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading
for the ambient concerns of schema-formats. Every variable carries the
``SCHEMA_FORMATS_`` prefix so an embedding application's own settings are not
picked up. Grammar limits (hostname length, label length, local-part length)
are module constants of the validators and are intentionally not part of the
settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "SCHEMA_FORMATS_"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    debug_all: bool = Field(
        default=False,
        description="Log the schema_formats namespace at DEBUG regardless of log_level",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for the schema_formats namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from schema_formats.config import get_settings

        settings = get_settings()
        level = settings.logging.log_level
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
