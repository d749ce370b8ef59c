"""
Numeric component unit tests.

Tests for the calculator, factorial cache, nCr, quadratic roots and age bands.
"""

from __future__ import annotations

import math

import pytest

from src.components.numeric import (
    AgeInput,
    CalculateInput,
    CombinationsInput,
    DivideInput,
    FactorialCache,
    FactorialInput,
    NumericConfig,
    QuadraticInput,
    calculate,
    classify_age,
    divide_modes,
    run_calculate,
    run_classify_age,
    run_combinations,
    run_divide,
    run_factorial,
    run_quadratic,
    solve_quadratic,
)
from src.domain.errors import DivisionByZeroError, InvalidDomainError, NonFiniteResultError


@pytest.fixture
def cache() -> FactorialCache:
    return FactorialCache()


# --- Calculator Tests ---


class TestCalculate:
    """Test the five-operator calculator."""

    @pytest.mark.parametrize(
        ("a", "b", "op", "expected", "name"),
        [
            (7, 3, "+", 10.0, "Addition"),
            (7, 3, "-", 4.0, "Subtraction"),
            (7, 3, "*", 21.0, "Multiplication"),
            (7, 2, "/", 3.5, "Division"),
            (7, 3, "%", 1.0, "Modulo"),
        ],
    )
    def test_operators(self, a: float, b: float, op: str, expected: float, name: str) -> None:
        result = calculate(a, b, op)
        assert result.value == expected
        assert result.operation_name == name

    def test_addition_matches_float_addition(self) -> None:
        """calculate(a, b, '+') is plain IEEE addition."""
        assert calculate(0.1, 0.2, "+").value == 0.1 + 0.2

    def test_modulo_sign_follows_dividend(self) -> None:
        assert calculate(-7, 3, "%").value == -1.0
        assert calculate(7, -3, "%").value == 1.0

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            calculate(5, 0, "/")

    def test_multiplication_overflow(self) -> None:
        with pytest.raises(NonFiniteResultError) as exc:
            calculate(1e308, 10, "*")
        assert exc.value.code == "non_finite_result"
        assert exc.value.field == "value"

    @pytest.mark.parametrize("operand", [math.nan, math.inf, -math.inf])
    def test_non_finite_operand(self, operand: float) -> None:
        with pytest.raises(NonFiniteResultError) as exc:
            calculate(operand, 1, "+")
        assert exc.value.field == "a"

    def test_overflow_reported_by_shell(self) -> None:
        output = run_calculate(CalculateInput(a=-1e308, b=1e308, op="-"))
        assert output.success is False
        assert output.errors[0].code == "non_finite_result"

    def test_modulo_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError) as exc:
            calculate(5, 0, "%")
        assert exc.value.code == "division_by_zero"

    def test_division_by_zero_is_domain_error(self) -> None:
        with pytest.raises(InvalidDomainError):
            calculate(1, 0.0, "/")

    def test_multiplication_by_zero_is_fine(self) -> None:
        assert calculate(5, 0, "*").value == 0.0

    def test_unknown_operator(self) -> None:
        with pytest.raises(InvalidDomainError) as exc:
            calculate(1, 2, "^")
        assert exc.value.code == "unsupported_operator"

    def test_operator_disabled_by_config(self) -> None:
        config = NumericConfig(operators=("+", "-"))
        with pytest.raises(InvalidDomainError):
            calculate(1, 2, "*", config)

    def test_run_calculate_success(self) -> None:
        result = run_calculate(CalculateInput(a=2, b=3, op="*"))
        assert result.success is True
        assert result.result is not None
        assert result.result.value == 6.0
        assert result.errors == ()

    def test_run_calculate_error(self) -> None:
        result = run_calculate(CalculateInput(a=2, b=0, op="/"))
        assert result.success is False
        assert result.result is None
        assert result.errors[0].code == "division_by_zero"
        assert result.errors[0].field == "b"


# --- Factorial Tests ---


class TestFactorial:
    """Test memoized factorial."""

    @pytest.mark.parametrize(("n", "expected"), [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_values(self, cache: FactorialCache, n: int, expected: int) -> None:
        assert cache.factorial(n) == expected

    def test_negative_rejected(self, cache: FactorialCache) -> None:
        with pytest.raises(InvalidDomainError):
            cache.factorial(-1)

    def test_non_integer_rejected(self, cache: FactorialCache) -> None:
        with pytest.raises(InvalidDomainError):
            cache.factorial(2.5)  # type: ignore[arg-type]

    def test_large_value_is_exact(self, cache: FactorialCache) -> None:
        assert cache.factorial(25) == math.factorial(25)

    def test_value_is_cached(self, cache: FactorialCache) -> None:
        assert 6 not in cache
        first = cache.factorial(6)
        assert 6 in cache
        assert cache.factorial(6) == first == 720

    def test_failed_call_not_cached(self, cache: FactorialCache) -> None:
        with pytest.raises(InvalidDomainError):
            cache.factorial(-3)
        assert len(cache) == 0

    def test_clear(self, cache: FactorialCache) -> None:
        cache.factorial(4)
        cache.clear()
        assert len(cache) == 0

    def test_run_factorial(self, cache: FactorialCache) -> None:
        ok = run_factorial(FactorialInput(n=5), cache)
        assert ok.success is True
        assert ok.value == 120

        bad = run_factorial(FactorialInput(n=-1), cache)
        assert bad.success is False
        assert bad.value is None
        assert bad.errors[0].code == "negative_factorial"


# --- Combinations Tests ---


class TestCombinations:
    """Test nCr."""

    def test_five_choose_two(self, cache: FactorialCache) -> None:
        result = cache.combinations(5, 2)
        assert result.value == 10
        assert result.n_factorial == 120
        assert result.r_factorial == 2
        assert result.n_minus_r_factorial == 6

    def test_edges(self, cache: FactorialCache) -> None:
        assert cache.combinations(5, 0).value == 1
        assert cache.combinations(5, 5).value == 1
        assert cache.combinations(0, 0).value == 1

    def test_r_greater_than_n(self, cache: FactorialCache) -> None:
        with pytest.raises(InvalidDomainError):
            cache.combinations(2, 5)

    def test_negative_r(self, cache: FactorialCache) -> None:
        with pytest.raises(InvalidDomainError):
            cache.combinations(5, -1)

    def test_large_n_exact(self, cache: FactorialCache) -> None:
        assert cache.combinations(60, 30).value == math.comb(60, 30)

    def test_run_combinations(self, cache: FactorialCache) -> None:
        ok = run_combinations(CombinationsInput(n=6, r=3), cache)
        assert ok.success is True
        assert ok.result is not None
        assert ok.result.value == 20

        bad = run_combinations(CombinationsInput(n=2, r=5), cache)
        assert bad.success is False
        assert bad.errors[0].code == "invalid_selection"


# --- Quadratic Tests ---


class TestSolveQuadratic:
    """Test quadratic roots."""

    def test_distinct_roots(self) -> None:
        result = solve_quadratic(1, -3, 2)
        assert result.kind == "distinct"
        assert result.discriminant == 1.0
        assert {r.real for r in result.roots} == {2.0, 1.0}
        assert all(r.is_real for r in result.roots)

    def test_repeated_root(self) -> None:
        result = solve_quadratic(1, 2, 1)
        assert result.kind == "repeated"
        assert result.discriminant == 0.0
        assert len(result.roots) == 1
        assert result.roots[0].real == -1.0

    def test_complex_roots(self) -> None:
        result = solve_quadratic(1, 0, 1)
        assert result.kind == "complex"
        assert result.discriminant == -4.0
        values = {r.as_complex() for r in result.roots}
        assert values == {complex(0, 1), complex(0, -1)}

    def test_roots_satisfy_equation(self) -> None:
        result = solve_quadratic(2, 3, -5)
        for root in result.roots:
            x = root.real
            assert 2 * x * x + 3 * x - 5 == pytest.approx(0.0)

    def test_zero_a_rejected(self) -> None:
        with pytest.raises(InvalidDomainError) as exc:
            solve_quadratic(0, 2, 1)
        assert exc.value.field == "a"

    def test_near_zero_discriminant_not_treated_as_repeated(self) -> None:
        """Repeated-root detection uses exact equality, not a tolerance."""
        # (x + 0.15)² has a zero discriminant in exact arithmetic, but
        # 0.1 + 0.2 rounds above 0.3 and leaves a tiny positive residue
        a, b, c = 1.0, 0.1 + 0.2, 0.0225
        result = solve_quadratic(a, b, c)
        assert result.discriminant == b * b - 4 * a * c
        assert result.discriminant > 0.0
        assert result.kind == "distinct"
        assert len(result.roots) == 2

    def test_run_quadratic(self) -> None:
        ok = run_quadratic(QuadraticInput(a=1, b=-3, c=2))
        assert ok.success is True

        bad = run_quadratic(QuadraticInput(a=0, b=1, c=1))
        assert bad.success is False
        assert bad.errors[0].code == "not_quadratic"


# --- Division Modes Tests ---


class TestDivideModes:
    """Test real, integer and modulo division."""

    def test_fifteen_over_four(self) -> None:
        result = divide_modes(15, 4)
        assert result.real_division == 3.75
        assert result.integer_division == 3.0
        assert result.modulo == 3.0

    def test_negative_floor(self) -> None:
        result = divide_modes(-7, 2)
        assert result.integer_division == -4.0
        assert result.modulo == -1.0

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZeroError):
            divide_modes(1, 0)

    def test_quotient_overflow(self) -> None:
        with pytest.raises(NonFiniteResultError) as exc:
            divide_modes(1e308, 1e-10)
        assert exc.value.field == "real_division"

    def test_run_divide(self) -> None:
        assert run_divide(DivideInput(numerator=23, denominator=5)).success is True
        assert run_divide(DivideInput(numerator=23, denominator=0)).success is False


# --- Age Band Tests ---


class TestClassifyAge:
    """Test age categories."""

    @pytest.mark.parametrize(
        ("age", "category"),
        [
            (0, "Early Childhood"),
            (4, "Early Childhood"),
            (5, "Child"),
            (12, "Child"),
            (13, "Teenager"),
            (17, "Teenager"),
            (18, "Adult"),
            (64, "Adult"),
            (65, "Senior"),
            (150, "Senior"),
        ],
    )
    def test_boundaries(self, age: int, category: str) -> None:
        assert classify_age(age).category == category

    @pytest.mark.parametrize("age", [-1, 151])
    def test_out_of_range(self, age: int) -> None:
        with pytest.raises(InvalidDomainError):
            classify_age(age)

    def test_run_classify_age(self) -> None:
        result = run_classify_age(AgeInput(age=30))
        assert result.success is True
        assert result.result is not None
        assert result.result.description == "Ages 18-64: Working age"
