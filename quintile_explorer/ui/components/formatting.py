"""
Utility helpers for formatting numeric values for display.
"""

from __future__ import annotations

from typing import Optional

SCALE_FACTORS = [
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def _scale_value(value: float):
    for factor, suffix in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, suffix
    return value, ""


def format_compact(value: Optional[float], decimals: int = 1) -> str:
    """Format large values with a K/M/B/T suffix."""
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    display_value, suffix = _scale_value(numeric)
    return f"{display_value:,.{decimals}f}{suffix}"


def format_year_span(year_min: Optional[int], year_max: Optional[int]) -> str:
    if year_min is None or year_max is None:
        return "–"
    if year_min == year_max:
        return str(year_min)
    return f"{year_min}–{year_max}"
