"""FastMCP server and tool definitions."""

import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.server.session import ServerSession

from typedoc_lookup.container import get_container
from typedoc_lookup.errors import UnknownSession
from typedoc_lookup.logging import tool_context
from typedoc_lookup.models import ErrorResponse, NavigationAction
from typedoc_lookup.profiling import profile_async

log = structlog.get_logger()

mcp = FastMCP("typedoc-lookup")


@mcp.tool()
@profile_async("get_docs")
async def get_docs(
    ctx: Context[ServerSession, None],
    symbol: str | None = None,
    display: bool = False,
) -> dict:
    """Show the declaration and documentation for an API symbol.

    Resolves a dotted identifier against the project's API model, matching
    each segment fuzzily, and renders its signature, description, parameters,
    return type and source locations as Markdown.

    Examples:
    - "Worker" - the Worker class, its methods and properties
    - "Worker.getPlayer" - a method, with one page per overload
    - "ClientVersion" - an enum with its members

    Args:
        symbol: Dotted identifier. Leave empty for a link to the docs site.
        display: Whether the answer should be shown to everyone.

    Returns:
        The rendered docs payload. ``session_id`` can be passed to
        navigate_definition when the symbol has several definitions.
    """
    if symbol:
        await ctx.info(f"Looking up: {symbol}")

    service = get_container().docs_service
    with tool_context("get_docs", symbol=symbol):
        payload = await service.lookup(symbol, display=display)
    return payload.model_dump(mode="json")


@mcp.tool()
@profile_async("navigate_definition")
async def navigate_definition(
    session_id: str,
    action: NavigationAction,
    ctx: Context[ServerSession, None],
) -> dict:
    """Page to the next or previous definition (overload) of a looked-up symbol.

    Args:
        session_id: The ``session_id`` returned by get_docs.
        action: "next" or "previous".

    Returns:
        The re-rendered docs payload for the newly selected definition.
    """
    service = get_container().docs_service
    with tool_context("navigate_definition", session_id=session_id):
        try:
            payload = await service.navigate(session_id, action)
        except UnknownSession as e:
            log.warning("unknown_session")
            await ctx.warning(str(e))
            return ErrorResponse(error=str(e)).model_dump()
    return payload.model_dump(mode="json")
