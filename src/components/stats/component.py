"""
Stats component - Descriptive statistics.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import sum_even_indexes, summarize
from .models import EvenIndexSumInput, EvenIndexSumOutput, SummarizeInput, SummarizeOutput


def run_summarize(input_data: SummarizeInput) -> SummarizeOutput:
    """Summarize a numeric sequence."""
    try:
        summary = summarize(input_data.values)
    except WorksheetError as e:
        return SummarizeOutput(summary=None, errors=e.details(), success=False)
    return SummarizeOutput(summary=summary, errors=(), success=True)


def run_even_index_sum(input_data: EvenIndexSumInput) -> EvenIndexSumOutput:
    """Sum the even-indexed elements (from index 2)."""
    try:
        result = sum_even_indexes(input_data.values)
    except WorksheetError as e:
        return EvenIndexSumOutput(result=None, errors=e.details(), success=False)
    return EvenIndexSumOutput(result=result, errors=(), success=True)
