"""Value coercion helpers shared by option parsing and cell extraction."""

from __future__ import annotations

import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_natural_number(value: Any) -> int:
    """Parse a value as a natural number (>= 0).

    Follows leading-integer parsing: "12 rows" -> 12, "abc" -> 0, 3.7 -> 3,
    negatives and anything unparseable -> 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(0, int(value))
    match = _LEADING_INT.match(str(value))
    return max(0, int(match.group(1))) if match else 0


def to_text(value: Any) -> str:
    """Render a decoded JSON scalar the way the service displays it.

    Integral floats drop their fractional part (1.0 -> "1") and booleans
    are lowercase.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def trim(text: str) -> str:
    """Strip leading and trailing spaces (spaces only)."""
    return text.strip(" ")
