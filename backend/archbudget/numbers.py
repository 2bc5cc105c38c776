"""Numeric helpers shared by the budget and fee calculators.

Lookup tables arrive with percentages and shares encoded as strings
("9.57%", "0.66", "$1,200"). These helpers parse them once at the data
boundary and round results the way the fee worksheets do (half-up to cents).
"""

from __future__ import annotations

import math
import re

_NUMERIC_NOISE = re.compile(r"[^0-9.+\-eE]")


def safe_parse_float(value: str | float | int | None, fallback: float = 0.0) -> float:
    """Parse a float, returning ``fallback`` for empty or non-finite values.

    Currency symbols, thousands separators and percent signs are stripped
    from strings before parsing.
    """
    if value is None:
        return fallback
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else fallback
    cleaned = _NUMERIC_NOISE.sub("", value.strip())
    if not cleaned:
        return fallback
    try:
        parsed = float(cleaned)
    except ValueError:
        return fallback
    return parsed if math.isfinite(parsed) else fallback


def percent_to_decimal(value: str | float | int | None) -> float:
    """Convert a percentage to a fraction (``"6.0%"`` -> 0.06, ``6`` -> 0.06)."""
    return safe_parse_float(value) / 100.0


def round_to(value: float, decimals: int = 2) -> float:
    """Round half-up to ``decimals`` places."""
    factor = 10.0**decimals
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float = math.inf) -> float:
    """Limit ``value`` to the closed range ``[lower, upper]``."""
    return max(lower, min(value, upper))


def shares_sum_to_one(shares: list[float], tolerance: float = 0.001) -> bool:
    """Return True when ``shares`` sum to 1.0 within ``tolerance``."""
    return abs(sum(shares) - 1.0) <= tolerance
