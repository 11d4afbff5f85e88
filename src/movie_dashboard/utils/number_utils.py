"""Numeric helpers shared by the transformation stages."""

import math
from typing import Iterable, List


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round a value half-up to a fixed number of decimals.

    Python's built-in ``round`` uses banker's rounding; dashboard figures are
    rounded half-up so that 2.125 becomes 2.13 and -2.125 becomes -2.12.

    Args:
        value: Value to round.
        decimals: Number of decimal places.

    Returns:
        Rounded value.
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, 0.0 for an empty iterable."""
    items: List[float] = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def pearson_correlation(xs: List[float], ys: List[float]) -> float:
    """Pearson correlation coefficient of two equally sized series.

    Args:
        xs: First series.
        ys: Second series.

    Returns:
        Correlation coefficient, or 0.0 when either series has no variance.
    """
    n = len(xs)
    if n == 0 or n != len(ys):
        return 0.0

    mean_x = sum(xs) / n
    mean_y = sum(ys) / n

    numerator = 0.0
    denom_x = 0.0
    denom_y = 0.0
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        numerator += dx * dy
        denom_x += dx * dx
        denom_y += dy * dy

    denominator = math.sqrt(denom_x * denom_y)
    if denominator == 0:
        return 0.0
    return numerator / denominator
