"""Display formatting for resource values.

The CPU and RAM formats follow ``kubectl top`` output conventions so that
numbers read the same as the familiar tooling.
"""

from __future__ import annotations

import math

from kubehoggers.constants.values import (
    BYTES_PER_MEBIBYTE,
    INFINITE_PERCENTAGE,
    UNDEFINED_PERCENTAGE,
)


def capacity_fraction(value: int, capacity: int) -> float:
    """Return ``value / capacity`` without coercing a zero capacity.

    A zero capacity yields ``inf`` for a positive value and ``nan`` for a zero
    value, the same results floating point division gives.
    """
    if capacity == 0:
        return math.inf if value > 0 else math.nan
    return value / capacity


def format_cpu_mcores(mcores: int) -> str:
    """Format millicores as ``"1500m"``."""
    return f"{mcores}m"


def format_memory_mebibytes(memory_bytes: int) -> str:
    """Format bytes as whole mebibytes, e.g. ``"2048Mi"``."""
    return f"{memory_bytes // BYTES_PER_MEBIBYTE}Mi"


def format_percentage(fraction: float) -> str:
    """Format a fraction as a two-decimal percentage.

    Non-finite fractions render as sentinels instead of numbers.
    """
    if math.isnan(fraction):
        return UNDEFINED_PERCENTAGE
    if math.isinf(fraction):
        return INFINITE_PERCENTAGE
    return f"{fraction * 100:.2f}%"
