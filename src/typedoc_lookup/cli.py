"""Command-line interface for typedoc-lookup."""

import signal
import sys

import structlog

from typedoc_lookup.app import create_app
from typedoc_lookup.errors import ModelLoadError

log = structlog.get_logger()


def main() -> None:
    """Entry point for the MCP server."""
    signal.signal(signal.SIGINT, lambda *_: sys.exit(0))
    try:
        app = create_app()
    except ModelLoadError as e:
        log.error("engine_startup_failed", error=str(e))
        sys.exit(1)
    log.info("starting_mcp_server", name=app.name)
    app.run()
