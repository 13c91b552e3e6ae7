"""Tests for logging configuration."""

import logging

import pytest
import structlog

from typedoc_lookup import logging as logging_module
from typedoc_lookup.logging import QUIET_LOGGERS, configure_logging, tool_context


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch):
    """Allow configure_logging to run again, restoring structlog afterwards."""
    monkeypatch.setattr(logging_module, "_configured", False)
    levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    structlog.reset_defaults()
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_merges_bound_context(self, fresh_logging):
        configure_logging()
        processors = structlog.get_config()["processors"]

        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_output_in_debug(self, fresh_logging):
        configure_logging(debug=True)
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_quiets_sdk_loggers(self, fresh_logging):
        configure_logging()
        assert logging.getLogger("mcp").level == logging.WARNING

    def test_debug_lets_sdk_loggers_through(self, fresh_logging):
        configure_logging(debug=True)
        assert logging.getLogger("mcp").level == logging.DEBUG

    def test_configures_once(self, fresh_logging):
        configure_logging()
        configure_logging(debug=True)
        assert logging.getLogger("mcp").level == logging.WARNING


class TestToolContext:
    """Tests for per-call log context."""

    def test_binds_tool_and_fields(self):
        with tool_context("get_docs", symbol="Worker"):
            assert structlog.contextvars.get_contextvars() == {"tool": "get_docs", "symbol": "Worker"}
        assert "tool" not in structlog.contextvars.get_contextvars()

    def test_skips_missing_fields(self):
        with tool_context("get_docs", symbol=None):
            assert structlog.contextvars.get_contextvars() == {"tool": "get_docs"}

    def test_events_carry_context(self):
        with tool_context("navigate_definition", session_id="abc"):
            event = structlog.contextvars.merge_contextvars(None, "info", {"event": "docs_session_navigated"})

        assert event == {"event": "docs_session_navigated", "tool": "navigate_definition", "session_id": "abc"}
