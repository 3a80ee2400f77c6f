"""Analysis modules: number formatting, 52-week range bar."""

from .formatting import normalize_value, scale_number
from .range_bar import range_bar, range_position

__all__ = ["normalize_value", "range_bar", "range_position", "scale_number"]
