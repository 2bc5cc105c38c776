"""Formatting helpers for budget and fee output.

Provides human-readable formatting for currency amounts, budget ranges,
shares and per-SF rates, the way fee proposals quote them
(e.g., '$1.6M - $1.7M' instead of '$1,622,100.00 - $1,730,240.00').
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$1,234,567')
    - Amounts < $10,000: with cents (e.g., '$9,876.54')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_budget_range(low: float, high: float) -> str:
    """Format a low/high budget pair.

    - Millions (>= $1M): '$X.XM - $X.XM'
    - Below $1M: '$XXX,XXX - $XXX,XXX'
    """
    if high >= 1_000_000:
        return f"${low / 1_000_000:.1f}M - ${high / 1_000_000:.1f}M"
    return f"${low:,.0f} - ${high:,.0f}"


def format_percentage(fraction: float, decimals: int = 1) -> str:
    """Format a fraction as a percentage ('0.66' -> '66.0%')."""
    return f"{fraction * 100:.{decimals}f}%"


def format_rate_psf(low: float, high: float) -> str:
    """Format an all-in rate range as '$XXX - $XXX / SF'."""
    return f"${low:,.0f} - ${high:,.0f} / SF"
