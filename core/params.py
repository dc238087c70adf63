# =============================================================================
# core/params.py  —  Parameter Normalization
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the caller-controlled argument mapping of a tool call into a
#   validated, bounded parameter set before anything reaches HUDU.
#
# THE POLICY (lenient-unknown, strict-declared):
#   - Unknown fields are dropped silently.  Hosts sometimes send extras.
#   - Declared fields must have the declared type, otherwise the call is
#     rejected and every failing field is named in one message.  Checking
#     is strict: true is not an id and "no" is not a boolean.
#   - Pagination fields are the exception: they are COERCED, never rejected.
#     page      → integer ≥ 1            (garbage becomes 1)
#     page_size → integer in [1, 100]    (garbage becomes 25)
#     HUDU answers page_size > 100 with a dedicated error; clamping here
#     means that error can never happen.
#
# WHY PYDANTIC?
#   Each tool's schema is a small pydantic model.  The same model gives us
#   validation, the per-field error list, and the JSON schema advertised in
#   tools/list, so the three can never drift apart.
# =============================================================================

import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

MIN_PAGE = 1
DEFAULT_PAGE = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 25


def _as_int(value: Any) -> Optional[int]:
    """Best-effort integer for pagination values; None when not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        return math.floor(value) if math.isfinite(value) else None
    return None


def coerce_page(value: Any) -> int:
    """Coerce a requested page number to an integer ≥ 1."""
    number = _as_int(value)
    if number is None:
        return DEFAULT_PAGE
    return max(MIN_PAGE, number)


def coerce_page_size(value: Any) -> int:
    """Coerce a requested page size into [1, 100]."""
    number = _as_int(value)
    if number is None:
        return DEFAULT_PAGE_SIZE
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, number))


def normalize_pagination_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``params`` with page/page_size coerced and nulls dropped.

    Absent pagination fields stay absent; HUDU applies its own defaults.
    """
    normalized = {key: value for key, value in params.items() if value is not None}
    if "page" in normalized:
        normalized["page"] = coerce_page(normalized["page"])
    if "page_size" in normalized:
        normalized["page_size"] = coerce_page_size(normalized["page_size"])
    return normalized


# =============================================================================
# Schema base classes
# =============================================================================
class ToolParams(BaseModel):
    """Base for every tool's argument schema."""

    # The pagination before-validators run ahead of the strict check
    model_config = ConfigDict(extra="ignore", strict=True)

    def to_query(self) -> dict[str, Any]:
        """The mapping forwarded to HUDU: declared, present, non-null fields."""
        return self.model_dump(exclude_none=True)


class PaginatedParams(ToolParams):
    """Arguments shared by every list tool."""

    page: Optional[int] = Field(
        default=None, ge=MIN_PAGE, description="Page number for pagination"
    )
    page_size: Optional[int] = Field(
        default=None,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Number of results per page",
    )

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value: Any) -> Optional[int]:
        return None if value is None else coerce_page(value)

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, value: Any) -> Optional[int]:
        return None if value is None else coerce_page_size(value)


class DetailParams(ToolParams):
    """Arguments of every get-by-id tool."""

    id: int = Field(ge=1, description="Record ID")


# =============================================================================
# Validation entry points
# =============================================================================
def validate_arguments(schema: type[ToolParams], arguments: Any) -> ToolParams:
    """Validate raw tool arguments against ``schema``.

    A missing argument object is treated as empty.

    Raises:
        pydantic.ValidationError: one entry per failing field.
    """
    if arguments is None:
        arguments = {}
    return schema.model_validate(arguments)


def format_validation_error(error: ValidationError, tool_name: Optional[str] = None) -> str:
    """Render every failing field as ``path: message``, comma-joined.

    With ``tool_name`` the message reads ``Invalid parameters for <tool>: ...``.
    """
    issues = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"]) or "arguments"
        issues.append(f"{path}: {issue['msg']}")
    target = f" for {tool_name}" if tool_name else ""
    return f"Invalid parameters{target}: {', '.join(issues)}"
