import logging
import sys

import structlog

from schema_formats.config import get_settings

LOGGER_NAMESPACE = "schema_formats"


def get_logger(name: str | None = None):
    """
    Get a logger with schema_formats prefix.

    Args:
        name: Module name (typically __name__). If None, returns root schema_formats logger.

    Returns:
        A structlog logger with schema_formats prefix.
    """
    if name is None:
        return structlog.get_logger(LOGGER_NAMESPACE)
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"{LOGGER_NAMESPACE}.{name}")


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for applications embedding schema_formats.

    Only the schema_formats logger level is changed; other loggers of the
    host application keep their levels. The root handler is installed only
    when the root logger has none yet, and structlog is configured globally.

    Environment variables (read through schema_formats.config):
        SCHEMA_FORMATS_LOG_LEVEL: Level for the schema_formats namespace (default INFO).
        SCHEMA_FORMATS_DEBUG_ALL: If "true", log the namespace at DEBUG whatever the level.
    """
    settings = get_settings().logging

    logging.basicConfig(
        stream=sys.stderr,
        level="WARNING",
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = "DEBUG" if settings.debug_all else settings.log_level
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
