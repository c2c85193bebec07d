"""Tests for logging setup."""

import logging

import pytest
import structlog

from schema_formats.utils.logging import format_context, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    """Undo the global logging configuration made by setup_logging."""
    package_logger = logging.getLogger("schema_formats")
    previous_level = package_logger.level
    yield
    package_logger.setLevel(previous_level)
    structlog.reset_defaults()


class TestFormatContext:
    """Tests for the context formatting processor."""

    def test_appends_bound_context(self):
        event_dict = {"event": "Rejected hostname", "subject": "-a", "level": "debug"}

        result = format_context(None, "debug", event_dict)

        assert result["event"] == "Rejected hostname [subject=-a]"

    def test_leaves_event_without_context(self):
        event_dict = {"event": "Registered", "level": "info", "logger": "x"}

        result = format_context(None, "info", event_dict)

        assert result["event"] == "Registered"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_package_level_from_env(self, monkeypatch, restore_logging):
        monkeypatch.setenv("SCHEMA_FORMATS_LOG_LEVEL", "debug")

        setup_logging()

        assert logging.getLogger("schema_formats").level == logging.DEBUG

    def test_default_level(self, monkeypatch, restore_logging):
        monkeypatch.delenv("SCHEMA_FORMATS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SCHEMA_FORMATS_DEBUG_ALL", raising=False)

        setup_logging()

        assert logging.getLogger("schema_formats").level == logging.INFO

    def test_debug_all_overrides_level(self, monkeypatch, restore_logging):
        monkeypatch.setenv("SCHEMA_FORMATS_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("SCHEMA_FORMATS_DEBUG_ALL", "true")

        setup_logging()

        assert logging.getLogger("schema_formats").level == logging.DEBUG

    def test_host_loggers_untouched(self, monkeypatch, restore_logging):
        monkeypatch.delenv("SCHEMA_FORMATS_DEBUG_ALL", raising=False)
        host_logger = logging.getLogger("host.application")
        host_logger.setLevel(logging.DEBUG)

        setup_logging()

        assert host_logger.level == logging.DEBUG
        host_logger.setLevel(logging.NOTSET)


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_bindable_logger(self):
        log = get_logger("tests")

        assert hasattr(log, "bind")
        assert hasattr(log, "debug")
