"""Basic descriptive statistics over integer samples."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "calculate_mean",
    "calculate_min",
    "calculate_max",
    "calculate_median",
    "calculate_stddev",
]


def calculate_mean(values: Iterable[int]) -> float | None:
    """Arithmetic mean, or None for an empty sample."""
    data = list(values)
    if not data:
        return None
    return math.fsum(data) / len(data)


def calculate_min(values: Iterable[int]) -> int | None:
    """Smallest value, or None for an empty sample."""
    return min(values, default=None)


def calculate_max(values: Iterable[int]) -> int | None:
    """Largest value, or None for an empty sample."""
    return max(values, default=None)


def calculate_median(values: Iterable[int]) -> float | None:
    """Median (mean of the two middle values for an even count), or None if empty."""
    data = sorted(values)
    if not data:
        return None
    middle, odd = divmod(len(data), 2)
    if odd:
        return float(data[middle])
    return (data[middle - 1] + data[middle]) / 2.0


def calculate_stddev(values: Iterable[int]) -> float | None:
    """Sample standard deviation (n - 1 in the denominator).

    Returns None for an empty sample and 0.0 for a single value.
    """
    data = list(values)
    if not data:
        return None
    if len(data) == 1:
        return 0.0
    mean = math.fsum(data) / len(data)
    variance = math.fsum((x - mean) ** 2 for x in data) / (len(data) - 1)
    return math.sqrt(variance)