# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (stdio)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server that the LLM host talks to, and registers one
#   MCP tool per entry in the routing table.
#
# HOW IT WORKS (the flow):
#   1. The host lists tools; FastMCP answers with each tool's name,
#      description and JSON input schema (generated from its pydantic model)
#   2. The host calls a tool by name, e.g. "get_companies"
#   3. FastMCP hands the raw arguments to RoutedTool.run()
#   4. RoutedTool forwards them to the ToolRouter, which validates, calls
#      HUDU, bounds the reply size and returns the text envelope
#   5. The envelope goes back to the host as a TextContent block
#
# WHY NOT @mcp.tool() DECORATED FUNCTIONS?
#   FastMCP would validate arguments from the function signature and raise
#   its own errors.  Our tools need the router's rules instead: clamp
#   pagination rather than reject it, drop unknown fields, and use the
#   InvalidParams / MethodNotFound / InternalError taxonomy.  A Tool subclass
#   receives the arguments untouched.
#
# ERRORS ON THE WIRE:
#   Router failures leave as ToolError("<kind>: <message>"), which FastMCP
#   returns to the host as an error result.  FastMCP looks tools up before
#   any tool runs, so RouterGuard sends unknown names to the router first;
#   they come back as "MethodNotFound: Unknown tool: <name>" too.
#
# STARTUP:
#   Before serving, validate_api_connection() calls HUDU's api_info endpoint
#   so a wrong key or URL fails at launch with a clear message instead of on
#   the first tool call.
# =============================================================================

from typing import Any

from fastmcp import FastMCP
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import HuduConfig
from core.errors import HuduApiError, HuduConnectionError, HuduStartupError
from core.hudu_client import HuduClient
from tools.errors import ToolCallError
from tools.log import log_status
from tools.router import ToolRouter

SERVER_NAME = "hudu-mcp"


class RoutedTool(Tool):
    """An MCP tool whose calls are answered by the ToolRouter."""

    router: Any = Field(exclude=True, repr=False)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            reply = await self.router.call_tool(self.name, arguments)
        except ToolCallError as exc:
            raise exc.as_tool_error() from exc
        return ToolResult(
            content=[TextContent(type="text", text=block["text"]) for block in reply["content"]]
        )


class RouterGuard(Middleware):
    """Answers calls to names the router doesn't know with MethodNotFound."""

    def __init__(self, router: ToolRouter):
        self.router = router

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name not in self.router.tool_names:
            try:
                await self.router.call_tool(name, context.message.arguments)
            except ToolCallError as exc:
                raise exc.as_tool_error() from exc
        return await call_next(context)


def build_server(router: ToolRouter) -> FastMCP:
    """Create a FastMCP server exposing every tool the router knows."""
    server = FastMCP(SERVER_NAME)
    server.add_middleware(RouterGuard(router))
    for spec in router.tool_specs:
        server.add_tool(
            RoutedTool(
                name=spec.name,
                description=spec.description,
                parameters=spec.input_schema(),
                router=router,
            )
        )
    return server


async def validate_api_connection(client: HuduClient) -> dict[str, Any]:
    """Check the key and URL against HUDU before serving.

    Raises:
        HuduStartupError: with a message pointing at the variable to fix.
    """
    base_url = client.config.base_url
    log_status("Validating HUDU API connection...")
    try:
        api_info = await client.get_api_info()
    except HuduApiError as exc:
        if exc.status_code == 401:
            raise HuduStartupError(
                "API key validation failed: Invalid or expired API key. "
                "Please check your HUDU_API_KEY."
            ) from exc
        if exc.status_code == 403:
            raise HuduStartupError(
                "API access denied: Your API key does not have sufficient permissions."
            ) from exc
        if exc.status_code == 404:
            raise HuduStartupError(
                f"URL validation failed: Cannot connect to {base_url}. "
                "Please check your HUDU_BASE_URL."
            ) from exc
        raise HuduStartupError(f"API connection failed: {exc}") from exc
    except HuduConnectionError as exc:
        raise HuduStartupError(
            f"URL validation failed: Cannot connect to {base_url}. "
            "Please check your HUDU_BASE_URL."
        ) from exc

    log_status(f"Connected to HUDU API (version {api_info.get('version', 'Unknown')}) at {base_url}")
    return api_info


async def serve(config: HuduConfig) -> None:
    """Validate the connection, then serve MCP over stdio until the host exits."""
    async with HuduClient(config) as client:
        await validate_api_connection(client)
        router = ToolRouter(client)
        server = build_server(router)
        log_status(f"{SERVER_NAME} running on stdio with {len(router.tool_names)} tools")
        await server.run_async(transport="stdio")
