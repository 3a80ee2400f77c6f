"""Conversion of loosely-typed provider values into display strings."""

from __future__ import annotations

import json
from typing import Any

# (threshold, divisor, suffix), checked in order. The "K" bucket divides by 1e3
# but only starts above 1e5; values in (1e5, 1e6] read as e.g. "250.000K".
_SCALE_BUCKETS: tuple[tuple[float, float, str], ...] = (
    (1.0e12, 1.0e12, "T"),
    (1.0e9, 1.0e9, "B"),
    (1.0e6, 1.0e6, "M"),
    (1.0e5, 1.0e3, "K"),
)


def scale_number(value: float) -> str:
    """Format a number with 3 decimals and a magnitude suffix.

    Examples:
    - 2.5e9 -> "2.500B"
    - 250_000 -> "250.000K"
    - 99_999.5 -> "99999.500"
    - -3_000_000 -> "-3000000.000" (negatives are never scaled)
    """
    for threshold, divisor, suffix in _SCALE_BUCKETS:
        if value > threshold:
            return f"{value / divisor:.3f}{suffix}"
    return f"{value:.3f}"


def normalize_value(value: Any) -> str:
    """Turn a JSON-decoded value into its display string.

    Strings pass through untouched, numbers are scaled, booleans are rendered
    the way JSON spells them and nested structures are dumped back to compact
    JSON. Null is rendered as an empty string, the same as a missing field,
    rather than a literal "null". Integers too large for a float keep their
    plain digits.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return str(value)
        return scale_number(number)
    if value is None:
        return ""
    return json.dumps(value, separators=(",", ":"))


def parse_float(text: str) -> float | None:
    """Parse a display string back to float, or None if it is not numeric.

    Digit separators ("1_000") and surrounding whitespace are rejected.
    """
    if not isinstance(text, str) or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None
