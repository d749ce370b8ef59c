"""
Descriptive statistics over a numeric sequence.

Every summary is recomputed from scratch; nothing is carried between calls.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.domain.errors import EmptyInputError, require_finite

from .models import EvenIndexSum, StatSummary


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    if not values:
        raise EmptyInputError("At least one value is required", field="values")
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Median; even-length sequences average the two centre values."""
    if not values:
        raise EmptyInputError("At least one value is required", field="values")
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def population_variance(values: Sequence[float], center: float | None = None) -> float:
    """Mean of squared deviations (divides by N, not N - 1)."""
    if center is None:
        center = mean(values)
    return sum((v - center) * (v - center) for v in values) / len(values)


def summarize(values: Sequence[float]) -> StatSummary:
    """
    Compute count, mean, median, variance, std-dev, min, max and range.

    Raises:
        EmptyInputError: values is empty
        NonFiniteResultError: a value is inf or NaN, or the sums overflow
    """
    values = [float(v) for v in values]
    if not values:
        raise EmptyInputError("At least one value is required", field="values")

    avg = require_finite(mean(values), "mean")
    variance = require_finite(population_variance(values, avg), "variance")

    low = values[0]
    high = values[0]
    for v in values:
        if v < low:
            low = v
        if v > high:
            high = v

    return StatSummary(
        count=len(values),
        mean=avg,
        median=median(values),
        variance=variance,
        std_dev=math.sqrt(variance),
        min=low,
        max=high,
        range=high - low,
    )


def sum_even_indexes(values: Sequence[float]) -> EvenIndexSum:
    """
    Sum the elements at indexes 2, 4, 6, ...

    Index 0 is not included.

    Raises:
        EmptyInputError: values is empty
    """
    values = [float(v) for v in values]
    if not values:
        raise EmptyInputError("At least one value is required", field="values")

    indexes = tuple(range(2, len(values), 2))
    picked = tuple(values[i] for i in indexes)
    total = require_finite(sum(picked), "total")
    return EvenIndexSum(total=total, indexes=indexes, values=picked)
