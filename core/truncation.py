# =============================================================================
# core/truncation.py  —  Response-Size Governor
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Guarantees (softly) that a tool response fits in the host's context
#   budget.  A HUDU listing can contain megabytes of article HTML; dumping
#   that into an LLM's context either fails outright or drowns the useful
#   bits.  This is Context Budget Discipline enforced mechanically.
#
# THE ALGORITHM:
#   1. MEASURE the pretty-printed JSON (indent=2).  At or under
#      MAX_RESPONSE_SIZE characters → hand the payload back untouched.
#   2. Otherwise copy it recursively with a budget of 80% of the ceiling
#      (the rest is headroom for the markers we add):
#        - strings over 10,000 chars are cut, wherever they are
#        - lists keep items in order until the next item would overflow,
#          then end with a marker item saying how many were dropped
#        - dicts keep entries in order until the next value would overflow,
#          then get _truncated/_message keys; later keys are simply gone
#        - every kept child is itself bounded with budget / 10
#   3. ATTACH _truncation_info at the top level.
#
# SOFT, NOT HARD:
#   The /10 split and the fixed string cap are heuristics.  Many small,
#   deeply nested siblings can still land somewhat above the budget.  The
#   output is always valid JSON and always smaller than the input.
# =============================================================================

import json
from collections.abc import Mapping
from typing import Any

from core.models import TruncationResult

MAX_RESPONSE_SIZE = 3_000_000
TRUNCATION_TARGET_RATIO = 0.8
CHILD_BUDGET_DIVISOR = 10
MAX_STRING_LENGTH = 10_000
TRUNCATED_STRING_SUFFIX = "... [truncated]"

TRUNCATION_ADVICE = (
    "Response was truncated due to size limits. "
    "Use pagination parameters to get smaller chunks of data."
)
OBJECT_TRUNCATED_MESSAGE = "Object truncated. Some properties were omitted due to size limits."


def serialize(data: Any) -> str:
    """The pretty-printed JSON form that every size in this module refers to."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def serialized_size(data: Any) -> int:
    return len(serialize(data))


def truncate_response(data: Any, max_size: int = MAX_RESPONSE_SIZE) -> TruncationResult:
    """Bound ``data`` to roughly ``max_size`` characters of pretty JSON.

    Args:
        data: Any JSON-compatible structure (dicts, lists, scalars).
        max_size: The ceiling.  Only tests pass anything but the default.

    Returns:
        A TruncationResult.  When nothing had to be cut, ``result.data`` is
        ``data`` itself.
    """
    original_size = serialized_size(data)
    if original_size <= max_size:
        return TruncationResult(data=data, truncated=False, original_size=original_size)

    truncated = _truncate_value(data, max_size * TRUNCATION_TARGET_RATIO)
    info = {
        "truncated": True,
        "original_size_chars": original_size,
        "truncated_size_chars": serialized_size(truncated),
        "message": TRUNCATION_ADVICE,
    }

    if isinstance(truncated, dict):
        bounded = {**truncated, "_truncation_info": info}
    else:
        bounded = {"data": truncated, "_truncation_info": info}

    return TruncationResult(data=bounded, truncated=True, original_size=original_size)


def _truncate_value(value: Any, budget: float) -> Any:
    if isinstance(value, str):
        return _truncate_string(value)
    if isinstance(value, Mapping):
        return _truncate_mapping(value, budget)
    if isinstance(value, (list, tuple)):
        return _truncate_sequence(value, budget)
    # numbers, booleans, None
    return value


def _truncate_string(value: str) -> str:
    if len(value) > MAX_STRING_LENGTH:
        return value[:MAX_STRING_LENGTH] + TRUNCATED_STRING_SUFFIX
    return value


def _truncate_sequence(items: Any, budget: float) -> list[Any]:
    child_budget = budget / CHILD_BUDGET_DIVISOR
    kept = []
    used = 0

    for index, item in enumerate(items):
        item_size = serialized_size(item)
        if used + item_size > budget:
            kept.append({
                "_truncated": True,
                "_message": (
                    f"Array truncated at index {index}. Original length: {len(items)}, "
                    f"showing first {index} items."
                ),
                "_remaining_items": len(items) - index,
            })
            break
        kept.append(_truncate_value(item, child_budget))
        used += item_size

    return kept


def _truncate_mapping(mapping: Mapping[str, Any], budget: float) -> dict[str, Any]:
    child_budget = budget / CHILD_BUDGET_DIVISOR
    kept: dict[str, Any] = {}
    used = 0

    for key, value in mapping.items():
        value_size = serialized_size(value)
        if used + value_size > budget:
            kept["_truncated"] = True
            kept["_message"] = OBJECT_TRUNCATED_MESSAGE
            break
        kept[key] = _truncate_value(value, child_budget)
        used += value_size

    return kept
