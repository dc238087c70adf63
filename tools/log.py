# =============================================================================
# tools/log.py  —  Colored stderr logging for tool traffic
# =============================================================================
# We log to STDERR because the MCP server talks to the host over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# COLORS:
#   CYAN   → incoming tool calls (name + arguments)
#   YELLOW → intermediate status (what HUDU returned, what was translated)
#   GREEN  → outgoing replies (size and summary only, never record bodies:
#            a password listing must not end up in a terminal scrollback)
# =============================================================================

import json
import logging
import sys
from typing import Any, Mapping

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

LOG_FORMAT = "%(asctime)s [MCP] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

logger = logging.getLogger("hudu_mcp")


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; call once at process start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )


def log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    if isinstance(arguments, Mapping):
        param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    else:
        param_str = repr(arguments)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, reply: Mapping[str, Any]) -> None:
    """Log the size of a reply and its summary line in GREEN."""
    text = reply["content"][0]["text"]
    summary = ""
    try:
        payload = json.loads(text)
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("summary"):
        summary = f" ({payload['summary']})"
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{summary}{_RESET}")
