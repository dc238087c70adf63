# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the MCP layer, the HUDU client and the response governor.
# They carry no behavior beyond trivial helpers.
#
# WHY FROZEN?
#   Every value is rebuilt per tool call and never mutated afterwards.
#   frozen=True makes an accidental write fail loudly instead of leaking
#   state between calls.
#
# WHAT IS NOT HERE:
#   HUDU records themselves (companies, articles, assets...).  The server
#   treats them as opaque JSON objects; only their place inside a paginated
#   collection matters to us.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any


# -----------------------------------------------------------------------------
# Resource — where a HUDU record type lives in the REST API
# -----------------------------------------------------------------------------
# HUDU is very regular: GET /api/v1/<path> returns {<collection_key>: [...],
# meta: {...}} and GET /api/v1/<path>/<id> returns {<item_key>: {...}}.
# One Resource value per record type is all the client needs to know.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Resource:
    """A HUDU record type and the JSON keys it is delivered under."""

    path: str                          # "asset_passwords"
    collection_key: str                # "asset_passwords"
    item_key: str                      # "asset_password"

    @property
    def endpoint(self) -> str:
        return f"/api/v1/{self.path}"


# -----------------------------------------------------------------------------
# PaginatedResult — one page of a HUDU listing
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PaginatedResult:
    """A single page of records plus HUDU's pagination block."""

    data: list[Any] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    # meta keys as HUDU sends them: current_page, next_page, prev_page,
    # total_pages, total_count.  Missing meta stays an empty dict.


# -----------------------------------------------------------------------------
# TruncationResult — output of the response-size governor
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TruncationResult:
    """Possibly-truncated payload with the size that was measured up front.

    truncated=False means ``data`` is the very object that was passed in.
    """

    data: Any
    truncated: bool
    original_size: int                 # characters of pretty-printed JSON


# -----------------------------------------------------------------------------
# ToolRequest — one inbound tools/call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolRequest:
    """The (name, arguments) pair received from the host."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)
