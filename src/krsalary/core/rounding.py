"""Rounding and display formatting for KRW amounts."""

from __future__ import annotations

import math

from krsalary.config.schema import RoundingMode


def round_amount(value: float, mode: RoundingMode) -> int:
    """Round an amount to a whole won.

    ``"nearest"`` rounds halves up (toward positive infinity), not to even.
    """
    if mode == "floor":
        return math.floor(value)
    if mode == "ceiling":
        return math.ceil(value)
    return math.floor(value + 0.5)


def format_amount(amount: float, suffix: str = "") -> str:
    """Format with thousands separators, e.g. ``1,234,567원``."""
    return f"{amount:,.0f}{suffix}"
