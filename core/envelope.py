# =============================================================================
# core/envelope.py  —  Tool Reply Envelope
# =============================================================================
#
# Every tool answers with the same shape:
#
#   {"content": [{"type": "text", "text": "<pretty-printed JSON>"}]}
#
# The payload always goes through the response-size governor first.  When
# it had to cut something and the caller supplied a summary, the summary
# inside the payload says so, so the LLM reading it knows to paginate.
# =============================================================================

from typing import Any, Optional

from core.truncation import MAX_RESPONSE_SIZE, serialize, truncate_response


def create_tool_response(
    data: Any,
    summary: Optional[str] = None,
    max_size: int = MAX_RESPONSE_SIZE,
) -> dict[str, Any]:
    """Bound ``data`` and wrap it as a single text content block."""
    result = truncate_response(data, max_size=max_size)
    payload = result.data

    if result.truncated and summary:
        payload["summary"] = (
            f"{summary} [Response truncated from "
            f"{round(result.original_size / 1000)}KB due to size limits]"
        )

    return {"content": [{"type": "text", "text": serialize(payload)}]}
