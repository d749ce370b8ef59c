"""
Numeric operations - calculator, factorial, nCr, quadratic roots.

Functional core: every function here is pure except FactorialCache, which
owns an explicit memo table.

Key behaviors:
- '%' is a truncating remainder (sign follows the dividend)
- Factorials are exact integers; the cache is never evicted implicitly
- nCr uses exact integer division, so large n does not lose precision
- A zero discriminant is detected with exact float equality
"""

from __future__ import annotations

import math
import threading

from src.domain.errors import DivisionByZeroError, InvalidDomainError, require_finite

from .models import (
    DEFAULT_CONFIG,
    AgeBand,
    CalculationResult,
    CombinationsResult,
    DivisionModes,
    NumericConfig,
    QuadraticRoots,
    Root,
)

OPERATION_NAMES: dict[str, str] = {
    "+": "Addition",
    "-": "Subtraction",
    "*": "Multiplication",
    "/": "Division",
    "%": "Modulo",
}

# (upper bound exclusive, category, description)
AGE_BANDS: tuple[tuple[int, str, str], ...] = (
    (5, "Early Childhood", "Ages 0-4: Pre-school age"),
    (13, "Child", "Ages 5-12: School-age children"),
    (18, "Teenager", "Ages 13-17: Adolescence"),
    (65, "Adult", "Ages 18-64: Working age"),
)
OPEN_AGE_BAND = ("Senior", "Ages 65+: Retirement age")


def _require_int(value: object, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDomainError(
            f"'{field}' must be an integer", code="not_an_integer", field=field
        )
    return value


# --- Calculator ---


def calculate(
    a: float,
    b: float,
    op: str,
    config: NumericConfig = DEFAULT_CONFIG,
) -> CalculationResult:
    """
    Apply a binary arithmetic operator.

    Raises:
        DivisionByZeroError: op is '/' or '%' and b == 0
        InvalidDomainError: op is not an allowed operator
        NonFiniteResultError: an operand or the result is inf or NaN
    """
    if op not in config.operators or op not in OPERATION_NAMES:
        raise InvalidDomainError(
            f"Unsupported operator '{op}'", code="unsupported_operator", field="op"
        )

    a = float(a)
    b = float(b)
    require_finite(a, "a")
    require_finite(b, "b")

    if op in ("/", "%") and b == 0:
        label = "Division" if op == "/" else "Modulo"
        raise DivisionByZeroError(f"{label} by zero", field="b")

    if op == "+":
        value = a + b
    elif op == "-":
        value = a - b
    elif op == "*":
        value = a * b
    elif op == "/":
        value = a / b
    else:
        value = math.fmod(a, b)

    require_finite(value, "value")

    return CalculationResult(
        a=a,
        b=b,
        op=op,
        operation_name=OPERATION_NAMES[op],
        value=value,
    )


def divide_modes(numerator: float, denominator: float) -> DivisionModes:
    """
    Real, integer (floor) and modulo division of the same operands.

    Raises:
        DivisionByZeroError: denominator == 0
        NonFiniteResultError: the quotient overflows
    """
    numerator = float(numerator)
    denominator = float(denominator)
    if denominator == 0:
        raise DivisionByZeroError("Denominator cannot be zero", field="denominator")

    real = numerator / denominator
    require_finite(real, "real_division")
    floored = float(math.floor(real))

    return DivisionModes(
        numerator=numerator,
        denominator=denominator,
        real_division=real,
        integer_division=floored,
        modulo=math.fmod(numerator, denominator),
    )


# --- Factorial / Combinations ---


class FactorialCache:
    """
    Memoized factorials keyed by n.

    Entries are added on first computation and kept for the lifetime of the
    cache. Guarded by a lock so one instance can serve a threaded host.
    """

    def __init__(self) -> None:
        self._values: dict[int, int] = {}
        self._lock = threading.Lock()

    def __contains__(self, n: object) -> bool:
        return n in self._values

    def __len__(self) -> int:
        return len(self._values)

    def factorial(self, n: int) -> int:
        """
        n! for a non-negative integer n.

        Raises:
            InvalidDomainError: n is negative or not an integer
        """
        n = _require_int(n, "n")
        if n < 0:
            raise InvalidDomainError(
                "Factorial is undefined for negative numbers", code="negative_factorial", field="n"
            )

        with self._lock:
            cached = self._values.get(n)
            if cached is not None:
                return cached

            result = 1
            for i in range(2, n + 1):
                result *= i
            self._values[n] = result
            return result

    def combinations(self, n: int, r: int) -> CombinationsResult:
        """
        nCr = n! / ((n - r)! * r!).

        Raises:
            InvalidDomainError: unless 0 <= r <= n
        """
        n = _require_int(n, "n")
        r = _require_int(r, "r")
        if r < 0 or n < 0 or r > n:
            raise InvalidDomainError(
                "Values must satisfy 0 <= r <= n", code="invalid_selection", field="r"
            )

        n_fact = self.factorial(n)
        r_fact = self.factorial(r)
        n_minus_r_fact = self.factorial(n - r)

        return CombinationsResult(
            n=n,
            r=r,
            value=n_fact // (n_minus_r_fact * r_fact),
            n_factorial=n_fact,
            r_factorial=r_fact,
            n_minus_r_factorial=n_minus_r_fact,
        )

    def clear(self) -> None:
        with self._lock:
            self._values.clear()


# --- Quadratic ---


def solve_quadratic(a: float, b: float, c: float) -> QuadraticRoots:
    """
    Solve ax² + bx + c = 0.

    The repeated-root branch is taken only when the discriminant is exactly
    zero; a tiny non-zero discriminant produced by rounding falls into the
    distinct or complex branch.

    Raises:
        InvalidDomainError: a == 0
        NonFiniteResultError: the discriminant overflows
    """
    a = float(a)
    b = float(b)
    c = float(c)
    if a == 0:
        raise InvalidDomainError(
            "Coefficient 'a' cannot be zero", code="not_quadratic", field="a"
        )

    discriminant = b * b - 4 * a * c
    require_finite(discriminant, "discriminant")
    two_a = 2 * a

    if discriminant > 0:
        sqrt_delta = math.sqrt(discriminant)
        roots = (
            Root(real=(-b + sqrt_delta) / two_a),
            Root(real=(-b - sqrt_delta) / two_a),
        )
        kind = "distinct"
    elif discriminant == 0:
        roots = (Root(real=-b / two_a),)
        kind = "repeated"
    else:
        real_part = -b / two_a
        imag_part = math.sqrt(-discriminant) / two_a
        roots = (
            Root(real=real_part, imaginary=imag_part),
            Root(real=real_part, imaginary=-imag_part),
        )
        kind = "complex"

    return QuadraticRoots(
        a=a,
        b=b,
        c=c,
        discriminant=discriminant,
        kind=kind,
        roots=roots,
    )


# --- Age bands ---


def classify_age(age: int, config: NumericConfig = DEFAULT_CONFIG) -> AgeBand:
    """
    Classify an age into a life-stage category.

    Raises:
        InvalidDomainError: age outside [min_age, max_age]
    """
    age = _require_int(age, "age")
    if age < config.min_age or age > config.max_age:
        raise InvalidDomainError(
            f"Age must be between {config.min_age} and {config.max_age}",
            code="age_out_of_range",
            field="age",
        )

    for upper, category, description in AGE_BANDS:
        if age < upper:
            return AgeBand(age=age, category=category, description=description)

    category, description = OPEN_AGE_BAND
    return AgeBand(age=age, category=category, description=description)


def create_factorial_cache() -> FactorialCache:
    return FactorialCache()
