"""52-week range visualization: where the last trade sits between the yearly low and high."""

from __future__ import annotations

import math

from .formatting import parse_float

BAR_WIDTH = 50
EMPTY_CHAR = "."
MARKER_CHAR = "*"


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def range_position(low52: str, high52: str, last: str) -> int | None:
    """Return the marker slot (0..49) for `last` within [low52, high52].

    The 0-100% range is compressed into 50 slots. Prices above the high clamp
    to the last slot and prices below the low clamp to the first.

    Returns None when any input is not numeric, the range is empty
    (low == high), or the result is not finite.
    """
    low = parse_float(low52)
    high = parse_float(high52)
    current = parse_float(last)
    if low is None or high is None or current is None:
        return None
    if high == low:
        return None

    raw = (current - low) / (high - low) * 100 / 2
    if not math.isfinite(raw):
        return None

    position = int(_round_half_away(raw))
    if position > BAR_WIDTH - 1:
        position = BAR_WIDTH - 1
    if position < 0:
        position = 0
    return position


def range_bar(low52: str, high52: str, last: str) -> str:
    """Render the 50-character range bar; all dots when the position is unknown."""
    slots = [EMPTY_CHAR] * BAR_WIDTH
    position = range_position(low52, high52, last)
    if position is not None:
        slots[position] = MARKER_CHAR
    return "".join(slots)
