"""
Stats component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ErrorDetail

# --- Input Models ---


@dataclass(frozen=True)
class SummarizeInput:
    """Input for descriptive statistics."""

    values: tuple[float, ...]


@dataclass(frozen=True)
class EvenIndexSumInput:
    """Input for the even-index sum."""

    values: tuple[float, ...]


# --- Results ---


@dataclass(frozen=True)
class StatSummary:
    """
    Descriptive statistics over a numeric sequence.

    Variance is the population variance (divides by N).
    """

    count: int
    mean: float
    median: float
    variance: float
    std_dev: float
    min: float
    max: float
    range: float


@dataclass(frozen=True)
class EvenIndexSum:
    """Sum of the elements at indexes 2, 4, 6, ..."""

    total: float
    indexes: tuple[int, ...]
    values: tuple[float, ...]


# --- Output Models ---


@dataclass(frozen=True)
class SummarizeOutput:
    summary: StatSummary | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class EvenIndexSumOutput:
    result: EvenIndexSum | None
    errors: tuple[ErrorDetail, ...]
    success: bool
