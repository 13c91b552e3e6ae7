"""Logging configuration for typedoc-lookup.

Events are structlog key-value pairs on stderr; stdout carries the MCP stdio
transport. Tool handlers bind ``tool`` (and ``symbol`` or ``session_id``)
through :func:`tool_context`, so every event a lookup emits names its call.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

# Stdlib loggers of the MCP SDK and its HTTP client, kept at WARNING outside debug mode.
QUIET_LOGGERS = ("mcp", "httpx")

_configured = False


def configure_logging(debug: bool = False) -> None:
    """Configure structlog for the server.

    Args:
        debug: If True, enable debug level and console output, and let the
               MCP SDK's own loggers through.
               If False, use info level and JSON output.
    """
    global _configured
    if _configured:
        return

    level = logging.DEBUG if debug else logging.INFO
    renderers: list = (
        [structlog.dev.ConsoleRenderer()]
        if debug
        else [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if debug else logging.WARNING)

    _configured = True


@contextmanager
def tool_context(tool: str, **fields: object) -> Iterator[None]:
    """Bind the tool name and its request fields to every event logged inside."""
    bound = {key: value for key, value in fields.items() if value is not None}
    with structlog.contextvars.bound_contextvars(tool=tool, **bound):
        yield
