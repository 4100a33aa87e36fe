"""
Query-parameter coercion — lenient integer parsing and clamping.

Pagination and limit parameters are clamped, never rejected: a value that
does not start with an integer falls back to the default.
"""
import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of ``raw`` ("12abc" -> 12), else ``default``."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    return int(match.group(1))


def clamp(value: int, lower: int, upper: Optional[int] = None) -> int:
    value = max(lower, value)
    if upper is not None:
        value = min(upper, value)
    return value
