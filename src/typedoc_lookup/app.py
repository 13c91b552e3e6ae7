"""Application factory and composition root.

Creates and wires settings, logging, container, and the MCP server.
"""

from mcp.server.fastmcp import FastMCP

from typedoc_lookup.config import get_settings
from typedoc_lookup.container import configure as configure_container
from typedoc_lookup.logging import configure_logging
from typedoc_lookup.profiling import configure_profiling


def create_app() -> FastMCP:
    """Create the fully-configured MCP application.

    The engine is built here, before the server starts; a model that fails
    to load or index aborts startup.
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)
    configure_profiling(enabled=settings.profile)
    container = configure_container(settings)
    _ = container.engine

    # Import tools after bootstrap so they can use get_container()
    from typedoc_lookup.server import mcp  # noqa: PLC0415

    return mcp
