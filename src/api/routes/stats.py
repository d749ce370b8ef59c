"""
Stats API - descriptive statistics over a list of numbers.
"""

import logging

from fastapi import APIRouter

from src.api.schemas import ERROR_RESPONSES, ValuesRequest, domain_error
from src.components.stats import (
    EvenIndexSum,
    EvenIndexSumInput,
    StatSummary,
    SummarizeInput,
    run_even_index_sum,
    run_summarize,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/summary", response_model=StatSummary, responses=ERROR_RESPONSES)
def summary(request: ValuesRequest) -> StatSummary:
    """Count, mean, median, population variance, std-dev and range."""
    output = run_summarize(SummarizeInput(values=tuple(request.values)))
    if output.summary is None:
        logger.warning("summary rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.summary


@router.post("/even-index-sum", response_model=EvenIndexSum, responses=ERROR_RESPONSES)
def even_index_sum(request: ValuesRequest) -> EvenIndexSum:
    output = run_even_index_sum(EvenIndexSumInput(values=tuple(request.values)))
    if output.result is None:
        logger.warning("even-index-sum rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.result
