"""
Utility helpers for formatting numbers, distances and availability labels.
"""

from __future__ import annotations

from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_distance(miles: Optional[float], decimals: int = 1) -> str:
    if miles is None:
        return "–"
    formatted = format_number(miles, decimals)
    if formatted == "–":
        return formatted
    unit = "mile" if formatted == f"{1:.{decimals}f}" else "miles"
    return f"{formatted} {unit}"


def format_availability(available: bool) -> str:
    return "Available" if available else "Not available"

