from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (62.5 -> 63)."""
    return int(math.floor(value + 0.5))


def as_number(value, default: float = 0.0) -> float:
    """Read a numeric cell; blanks and junk count as ``default``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def compact_number(value: float):
    """Return an int when the float has no fractional part."""
    return int(value) if float(value).is_integer() else value


def percentage(part: float, whole: float) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
