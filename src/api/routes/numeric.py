"""
Numeric API.

Calculator, factorial, nCr, quadratic roots, division modes and age bands.
Every endpoint is a pure computation except factorial/combinations, which
share the process-wide factorial cache.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.deps import get_factorial_cache, get_numeric_config
from src.api.schemas import ERROR_RESPONSES, FiniteRequest, domain_error
from src.components.numeric import (
    AgeBand,
    AgeInput,
    CalculateInput,
    CalculationResult,
    CombinationsInput,
    CombinationsResult,
    DivideInput,
    DivisionModes,
    FactorialCache,
    FactorialInput,
    NumericConfig,
    QuadraticInput,
    QuadraticRoots,
    run_calculate,
    run_classify_age,
    run_combinations,
    run_divide,
    run_factorial,
    run_quadratic,
)

router = APIRouter()
logger = logging.getLogger(__name__)


# --- Request/Response Models ---


class CalculateRequest(FiniteRequest):
    a: float
    b: float
    op: str


class FactorialRequest(BaseModel):
    n: int


class FactorialResponse(BaseModel):
    n: int
    value: int


class CombinationsRequest(BaseModel):
    n: int
    r: int


class QuadraticRequest(FiniteRequest):
    a: float
    b: float
    c: float


class DivideRequest(FiniteRequest):
    numerator: float
    denominator: float


class AgeRequest(BaseModel):
    age: int


# --- Endpoints ---


@router.post("/calculate", response_model=CalculationResult, responses=ERROR_RESPONSES)
def calculate(
    request: CalculateRequest,
    config: NumericConfig = Depends(get_numeric_config),
) -> CalculationResult:
    """Apply one of the configured operators to two operands."""
    output = run_calculate(CalculateInput(a=request.a, b=request.b, op=request.op), config)
    if output.result is None:
        logger.warning("calculate rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.result


@router.post("/factorial", response_model=FactorialResponse, responses=ERROR_RESPONSES)
def factorial(
    request: FactorialRequest,
    cache: FactorialCache = Depends(get_factorial_cache),
) -> FactorialResponse:
    output = run_factorial(FactorialInput(n=request.n), cache)
    if output.value is None:
        logger.warning("factorial rejected: n=%s", request.n)
        raise domain_error(output.errors)
    return FactorialResponse(n=output.n, value=output.value)


@router.post("/combinations", response_model=CombinationsResult, responses=ERROR_RESPONSES)
def combinations(
    request: CombinationsRequest,
    cache: FactorialCache = Depends(get_factorial_cache),
) -> CombinationsResult:
    """nCr = n! / (r! (n-r)!)."""
    output = run_combinations(CombinationsInput(n=request.n, r=request.r), cache)
    if output.result is None:
        logger.warning("combinations rejected: n=%s r=%s", request.n, request.r)
        raise domain_error(output.errors)
    return output.result


@router.post("/quadratic", response_model=QuadraticRoots, responses=ERROR_RESPONSES)
def quadratic(request: QuadraticRequest) -> QuadraticRoots:
    output = run_quadratic(QuadraticInput(a=request.a, b=request.b, c=request.c))
    if output.result is None:
        logger.warning("quadratic rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.result


@router.post("/divide", response_model=DivisionModes, responses=ERROR_RESPONSES)
def divide(request: DivideRequest) -> DivisionModes:
    """Real division, integer (floor) division and modulo side by side."""
    output = run_divide(
        DivideInput(numerator=request.numerator, denominator=request.denominator)
    )
    if output.result is None:
        logger.warning("divide rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.result


@router.post("/age-band", response_model=AgeBand, responses=ERROR_RESPONSES)
def age_band(
    request: AgeRequest,
    config: NumericConfig = Depends(get_numeric_config),
) -> AgeBand:
    output = run_classify_age(AgeInput(age=request.age), config)
    if output.result is None:
        logger.warning("age-band rejected: age=%s", request.age)
        raise domain_error(output.errors)
    return output.result
