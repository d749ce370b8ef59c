"""
Stats component - Descriptive statistics over numeric sequences.
"""

from ._impl import mean, median, population_variance, sum_even_indexes, summarize
from .component import run_even_index_sum, run_summarize
from .models import (
    EvenIndexSum,
    EvenIndexSumInput,
    EvenIndexSumOutput,
    StatSummary,
    SummarizeInput,
    SummarizeOutput,
)

__all__ = [
    # Entry points
    "run_summarize",
    "run_even_index_sum",
    # Functional core
    "summarize",
    "sum_even_indexes",
    "mean",
    "median",
    "population_variance",
    # Models
    "SummarizeInput",
    "SummarizeOutput",
    "StatSummary",
    "EvenIndexSumInput",
    "EvenIndexSumOutput",
    "EvenIndexSum",
]
