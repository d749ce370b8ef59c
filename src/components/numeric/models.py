"""
Numeric component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.errors import ErrorDetail
from src.rules.models import WorksheetRules

Operator = Literal["+", "-", "*", "/", "%"]
RootKind = Literal["distinct", "repeated", "complex"]


# --- Configuration ---


@dataclass(frozen=True)
class NumericConfig:
    """Numeric component configuration."""

    operators: tuple[str, ...] = ("+", "-", "*", "/", "%")
    min_age: int = 0
    max_age: int = 150

    @classmethod
    def from_rules(cls, rules: WorksheetRules) -> NumericConfig:
        return cls(
            operators=tuple(rules.calculator.operators),
            min_age=rules.ages.min_age,
            max_age=rules.ages.max_age,
        )


DEFAULT_CONFIG = NumericConfig()


# --- Input Models ---


@dataclass(frozen=True)
class CalculateInput:
    """Input for a two-operand calculation."""

    a: float
    b: float
    op: str


@dataclass(frozen=True)
class FactorialInput:
    """Input for factorial."""

    n: int


@dataclass(frozen=True)
class CombinationsInput:
    """Input for nCr."""

    n: int
    r: int


@dataclass(frozen=True)
class QuadraticInput:
    """Coefficients of ax² + bx + c = 0."""

    a: float
    b: float
    c: float


@dataclass(frozen=True)
class DivideInput:
    """Input for the division-modes demonstration."""

    numerator: float
    denominator: float


@dataclass(frozen=True)
class AgeInput:
    """Input for age classification."""

    age: int


# --- Results ---


@dataclass(frozen=True)
class CalculationResult:
    """Result of a calculation."""

    a: float
    b: float
    op: str
    operation_name: str
    value: float


@dataclass(frozen=True)
class CombinationsResult:
    """nCr together with the factorials it was built from."""

    n: int
    r: int
    value: int
    n_factorial: int
    r_factorial: int
    n_minus_r_factorial: int


@dataclass(frozen=True)
class Root:
    """A quadratic root; imaginary is 0.0 for real roots."""

    real: float
    imaginary: float = 0.0

    @property
    def is_real(self) -> bool:
        return self.imaginary == 0.0

    def as_complex(self) -> complex:
        return complex(self.real, self.imaginary)


@dataclass(frozen=True)
class QuadraticRoots:
    """Roots of a quadratic equation."""

    a: float
    b: float
    c: float
    discriminant: float
    kind: RootKind
    roots: tuple[Root, ...]


@dataclass(frozen=True)
class DivisionModes:
    """Real, floor and remainder division of the same operands."""

    numerator: float
    denominator: float
    real_division: float
    integer_division: float
    modulo: float


@dataclass(frozen=True)
class AgeBand:
    """Age category."""

    age: int
    category: str
    description: str


# --- Output Models ---


@dataclass(frozen=True)
class CalculateOutput:
    result: CalculationResult | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class FactorialOutput:
    n: int
    value: int | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class CombinationsOutput:
    result: CombinationsResult | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class QuadraticOutput:
    result: QuadraticRoots | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class DivideOutput:
    result: DivisionModes | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class AgeOutput:
    result: AgeBand | None
    errors: tuple[ErrorDetail, ...]
    success: bool
