"""
Numeric component - Calculator, combinatorics and quadratic roots.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import FactorialCache, calculate, classify_age, divide_modes, solve_quadratic
from .models import (
    DEFAULT_CONFIG,
    AgeInput,
    AgeOutput,
    CalculateInput,
    CalculateOutput,
    CombinationsInput,
    CombinationsOutput,
    DivideInput,
    DivideOutput,
    FactorialInput,
    FactorialOutput,
    NumericConfig,
    QuadraticInput,
    QuadraticOutput,
)


def run_calculate(
    input_data: CalculateInput,
    config: NumericConfig = DEFAULT_CONFIG,
) -> CalculateOutput:
    """Run a two-operand calculation."""
    try:
        result = calculate(input_data.a, input_data.b, input_data.op, config)
    except WorksheetError as e:
        return CalculateOutput(result=None, errors=e.details(), success=False)
    return CalculateOutput(result=result, errors=(), success=True)


def run_factorial(input_data: FactorialInput, cache: FactorialCache) -> FactorialOutput:
    """Compute n! through the shared cache."""
    try:
        value = cache.factorial(input_data.n)
    except WorksheetError as e:
        return FactorialOutput(n=input_data.n, value=None, errors=e.details(), success=False)
    return FactorialOutput(n=input_data.n, value=value, errors=(), success=True)


def run_combinations(input_data: CombinationsInput, cache: FactorialCache) -> CombinationsOutput:
    """Compute nCr through the shared cache."""
    try:
        result = cache.combinations(input_data.n, input_data.r)
    except WorksheetError as e:
        return CombinationsOutput(result=None, errors=e.details(), success=False)
    return CombinationsOutput(result=result, errors=(), success=True)


def run_quadratic(input_data: QuadraticInput) -> QuadraticOutput:
    """Solve a quadratic equation."""
    try:
        result = solve_quadratic(input_data.a, input_data.b, input_data.c)
    except WorksheetError as e:
        return QuadraticOutput(result=None, errors=e.details(), success=False)
    return QuadraticOutput(result=result, errors=(), success=True)


def run_divide(input_data: DivideInput) -> DivideOutput:
    """Show real, integer and modulo division side by side."""
    try:
        result = divide_modes(input_data.numerator, input_data.denominator)
    except WorksheetError as e:
        return DivideOutput(result=None, errors=e.details(), success=False)
    return DivideOutput(result=result, errors=(), success=True)


def run_classify_age(
    input_data: AgeInput,
    config: NumericConfig = DEFAULT_CONFIG,
) -> AgeOutput:
    """Classify an age."""
    try:
        result = classify_age(input_data.age, config)
    except WorksheetError as e:
        return AgeOutput(result=None, errors=e.details(), success=False)
    return AgeOutput(result=result, errors=(), success=True)
