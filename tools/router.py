# =============================================================================
# tools/router.py  —  Tool Router (single entry point for every tool call)
# =============================================================================
#
# HOW A CALL FLOWS:
#
#   Received → Routed → Validated → Invoked → Enveloped → Returned
#                 │          │          │
#                 │          │          └─ HUDU / anything else fails
#                 │          │             → InternalError
#                 │          └─ arguments fail the tool's schema
#                 │             → InvalidParams
#                 └─ name not in the routing table
#                    → MethodNotFound
#
#   The router owns the table (tool name → ResourceHandler) and the error
#   translation.  Handlers own validation, the HUDU call and the reply shape.
#
# STATELESS:
#   Nothing survives a call.  Overlapping calls share only the HUDU client's
#   connection pool.
# =============================================================================

from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError

from core.models import ToolRequest
from core.params import format_validation_error
from tools.errors import (
    InternalToolError,
    InvalidParamsError,
    MethodNotFoundError,
    ToolCallError,
)
from tools.handlers import HANDLERS, ResourceHandler, ToolSpec
from tools.log import log_request, log_response, log_status, logger


class ToolRouter:
    """Dispatches ``(tool name, arguments)`` to the owning handler group."""

    def __init__(self, client: Any, handlers: Sequence[ResourceHandler] = HANDLERS):
        self._client = client
        self._routes: dict[str, ResourceHandler] = {}
        self._specs: dict[str, ToolSpec] = {}
        for handler in handlers:
            for spec in handler.tools:
                if spec.name in self._routes:
                    raise ValueError(f"Duplicate tool name: {spec.name}")
                self._routes[spec.name] = handler
                self._specs[spec.name] = spec

    @property
    def tool_names(self) -> list[str]:
        return list(self._specs)

    @property
    def tool_specs(self) -> list[ToolSpec]:
        return list(self._specs.values())

    async def call_tool(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        """Run one tool call and return its reply envelope.

        Raises:
            MethodNotFoundError: unknown tool name.
            InvalidParamsError: arguments failed the tool's schema.
            InternalToolError: HUDU or anything else failed.
        """
        request = ToolRequest(name=name, arguments=arguments if arguments is not None else {})
        log_request(request.name, request.arguments)

        handler = self._routes.get(request.name)
        if handler is None:
            log_status(f"Unknown tool: {request.name}")
            raise MethodNotFoundError(f"Unknown tool: {request.name}")

        try:
            reply = await handler.handle(request.name, request.arguments, self._client)
        except ToolCallError:
            raise
        except ValidationError as exc:
            message = format_validation_error(exc, request.name)
            log_status(f"{request.name}: {message}")
            raise InvalidParamsError(message) from exc
        except Exception as exc:
            logger.exception("%s failed", request.name)
            raise InternalToolError(f"Failed to execute {request.name}: {exc}") from exc

        log_response(request.name, reply)
        return reply
