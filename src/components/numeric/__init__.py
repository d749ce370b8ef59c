"""
Numeric component - Calculator, factorial, nCr, quadratic roots.
"""

from ._impl import (
    AGE_BANDS,
    OPERATION_NAMES,
    FactorialCache,
    calculate,
    classify_age,
    create_factorial_cache,
    divide_modes,
    solve_quadratic,
)
from .component import (
    run_calculate,
    run_classify_age,
    run_combinations,
    run_divide,
    run_factorial,
    run_quadratic,
)
from .models import (
    DEFAULT_CONFIG,
    AgeBand,
    AgeInput,
    AgeOutput,
    CalculateInput,
    CalculateOutput,
    CalculationResult,
    CombinationsInput,
    CombinationsOutput,
    CombinationsResult,
    DivideInput,
    DivideOutput,
    DivisionModes,
    FactorialInput,
    FactorialOutput,
    NumericConfig,
    Operator,
    QuadraticInput,
    QuadraticOutput,
    QuadraticRoots,
    Root,
    RootKind,
)

__all__ = [
    # Entry points
    "run_calculate",
    "run_factorial",
    "run_combinations",
    "run_quadratic",
    "run_divide",
    "run_classify_age",
    # Functional core
    "calculate",
    "divide_modes",
    "solve_quadratic",
    "classify_age",
    "FactorialCache",
    "create_factorial_cache",
    "AGE_BANDS",
    "OPERATION_NAMES",
    # Input models
    "CalculateInput",
    "FactorialInput",
    "CombinationsInput",
    "QuadraticInput",
    "DivideInput",
    "AgeInput",
    # Output models
    "CalculateOutput",
    "FactorialOutput",
    "CombinationsOutput",
    "QuadraticOutput",
    "DivideOutput",
    "AgeOutput",
    "CalculationResult",
    "CombinationsResult",
    "QuadraticRoots",
    "Root",
    "RootKind",
    "DivisionModes",
    "AgeBand",
    "Operator",
    # Config
    "NumericConfig",
    "DEFAULT_CONFIG",
]
