# =============================================================================
# tools/errors.py  —  Tool-call error taxonomy
# =============================================================================
# Three kinds reach the caller:
#
#   InvalidParams   (-32602)  arguments failed the tool's schema
#   MethodNotFound  (-32601)  no such tool in the routing table
#   InternalError   (-32603)  HUDU failed, or anything else went wrong
#
# Inside the process they are McpError subclasses carrying the JSON-RPC code.
# On the wire FastMCP reports tool failures as an error result, so
# as_tool_error() puts the kind at the front of the text:
#
#   "InvalidParams: Invalid parameters for get_company_details: id: ..."
#
# Messages are one line; tracebacks stay in the stderr log.
# =============================================================================

from typing import ClassVar

from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolCallError(McpError):
    """Base class; ``kind`` names the taxonomy entry."""

    code: ClassVar[int] = INTERNAL_ERROR
    kind: ClassVar[str] = "InternalError"

    def __init__(self, message: str):
        super().__init__(ErrorData(code=self.code, message=message))

    def as_tool_error(self) -> ToolError:
        """The FastMCP error the host receives: ``"<kind>: <message>"``."""
        return ToolError(f"{self.kind}: {self.error.message}")


class InvalidParamsError(ToolCallError):
    code = INVALID_PARAMS
    kind = "InvalidParams"


class MethodNotFoundError(ToolCallError):
    code = METHOD_NOT_FOUND
    kind = "MethodNotFound"


class InternalToolError(ToolCallError):
    code = INTERNAL_ERROR
    kind = "InternalError"
