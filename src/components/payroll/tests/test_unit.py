"""
Payroll component unit tests.

Tests for registration, validation, listing and payroll summary.
"""

from __future__ import annotations

import pytest

from src.components.payroll import (
    EmployeeRecord,
    PayrollConfig,
    PayrollRegistry,
    RegisterEmployeeInput,
    create_payroll_registry,
    run_list,
    run_register,
    run_summary,
    validate_registration,
)
from src.domain.errors import ValidationError
from src.rules.models import WorksheetRules

# --- Mock Repository ---


class MockEmployeeRepo:
    """Records every append for inspection."""

    def __init__(self) -> None:
        self.appended: list[EmployeeRecord] = []

    def append(self, record: EmployeeRecord) -> EmployeeRecord:
        self.appended.append(record)
        return record

    def get_all(self) -> list[EmployeeRecord]:
        return list(self.appended)

    def count(self) -> int:
        return len(self.appended)


@pytest.fixture
def registry() -> PayrollRegistry:
    return PayrollRegistry()


def _register(registry: PayrollRegistry, **overrides: object) -> EmployeeRecord:
    fields: dict[str, object] = {
        "first_name": "Ada",
        "last_name": "Obi",
        "year_of_birth": 1990,
        "next_of_kin": "Chidi Obi",
        "address": "12 Marina Road, Lagos",
    }
    fields.update(overrides)
    return registry.register(**fields)  # type: ignore[arg-type]


# --- Registration Tests ---


class TestRegister:
    """Test employee registration."""

    def test_derived_fields(self, registry: PayrollRegistry) -> None:
        emp = _register(registry)
        assert emp.age == 36
        assert emp.retirement_year == 2055
        assert emp.gross_pay == 100000
        assert emp.tax_deduction == 12500
        assert emp.pension_deduction == 7500
        assert emp.health_deduction == 5000
        assert emp.housing_deduction == 5000
        assert emp.total_deductions == 30000
        assert emp.net_pay == 70000

    def test_net_pay_invariant(self, registry: PayrollRegistry) -> None:
        emp = _register(registry, year_of_birth=1975)
        assert emp.net_pay == emp.gross_pay - emp.total_deductions

    def test_fields_trimmed(self, registry: PayrollRegistry) -> None:
        emp = _register(registry, first_name="  Ada ", address=" 1 Road ")
        assert emp.first_name == "Ada"
        assert emp.address == "1 Road"
        assert emp.full_name == "Ada Obi"

    def test_year_as_string(self, registry: PayrollRegistry) -> None:
        emp = _register(registry, year_of_birth=" 2000 ")
        assert emp.year_of_birth == 2000
        assert emp.age == 26

    def test_employee_numbers_sequential(self, registry: PayrollRegistry) -> None:
        first = _register(registry)
        second = _register(registry, first_name="Bola")
        assert (first.employee_number, second.employee_number) == (1, 2)

    @pytest.mark.parametrize("year", [1950, 2010])
    def test_year_bounds_inclusive(self, registry: PayrollRegistry, year: int) -> None:
        assert _register(registry, year_of_birth=year).year_of_birth == year

    @pytest.mark.parametrize("year", [1949, 2011])
    def test_year_out_of_range(self, registry: PayrollRegistry, year: int) -> None:
        with pytest.raises(ValidationError) as exc:
            _register(registry, year_of_birth=year)
        assert exc.value.errors[0].code == "year_out_of_range"

    @pytest.mark.parametrize(
        "field", ["first_name", "last_name", "next_of_kin", "address"]
    )
    def test_blank_field_rejected(self, registry: PayrollRegistry, field: str) -> None:
        with pytest.raises(ValidationError) as exc:
            _register(registry, **{field: "   "})
        assert exc.value.errors[0].field == field
        assert exc.value.errors[0].code == "required"

    def test_non_numeric_year(self, registry: PayrollRegistry) -> None:
        with pytest.raises(ValidationError) as exc:
            _register(registry, year_of_birth="nineteen")
        assert exc.value.errors[0].code == "year_invalid"

    def test_all_errors_reported(self) -> None:
        errors = validate_registration("", "", "", "", "")
        assert [e.field for e in errors] == [
            "first_name",
            "last_name",
            "next_of_kin",
            "address",
            "year_of_birth",
        ]

    def test_failed_registration_does_not_mutate(self, registry: PayrollRegistry) -> None:
        _register(registry)
        with pytest.raises(ValidationError):
            _register(registry, year_of_birth=1900)
        assert len(registry.list_employees()) == 1

    def test_record_is_frozen(self, registry: PayrollRegistry) -> None:
        emp = _register(registry)
        with pytest.raises(AttributeError):
            emp.net_pay = 0  # type: ignore[misc]

    def test_uses_injected_repo(self) -> None:
        repo = MockEmployeeRepo()
        registry = PayrollRegistry(repo=repo)
        _register(registry)
        assert len(repo.appended) == 1


# --- List / Summary Tests ---


class TestListAndSummary:
    """Test read-only registry views."""

    def test_empty_registry(self, registry: PayrollRegistry) -> None:
        assert registry.list_employees() == ()
        summary = registry.summarize()
        assert summary.count == 0
        assert summary.total_gross == 0
        assert summary.total_deductions == 0
        assert summary.total_net == 0

    def test_list_in_registration_order(self, registry: PayrollRegistry) -> None:
        for name in ("Ada", "Bola", "Chi"):
            _register(registry, first_name=name)
        assert [e.first_name for e in registry.list_employees()] == ["Ada", "Bola", "Chi"]

    def test_list_grows_by_one(self, registry: PayrollRegistry) -> None:
        before = len(registry.list_employees())
        _register(registry)
        assert len(registry.list_employees()) == before + 1

    def test_summary_totals(self, registry: PayrollRegistry) -> None:
        _register(registry)
        _register(registry, first_name="Bola", year_of_birth=1985)
        summary = registry.summarize()
        assert summary.count == 2
        assert summary.total_gross == 200000
        assert summary.total_deductions == 60000
        assert summary.total_net == 140000

    def test_reads_are_idempotent(self, registry: PayrollRegistry) -> None:
        _register(registry)
        assert registry.list_employees() == registry.list_employees()
        assert registry.summarize() == registry.summarize()
        assert len(registry) == 1


# --- Config Tests ---


class TestConfig:
    """Test registry configuration."""

    def test_custom_rates(self) -> None:
        config = PayrollConfig(gross_pay=1000, tax_rate=0.1, pension_rate=0, health_rate=0, housing_rate=0)
        emp = _register(PayrollRegistry(config=config))
        assert emp.tax_deduction == 100
        assert emp.net_pay == 900

    def test_factory_reads_rules(self) -> None:
        rules = WorksheetRules.model_validate({"payroll": {"current_year": 2030}})
        registry = create_payroll_registry(rules)
        assert _register(registry).age == 40

    def test_factory_defaults(self) -> None:
        assert create_payroll_registry().config == PayrollConfig()


# --- Shell Layer Tests ---


class TestShellFunctions:
    """Test run_* entry points."""

    def test_run_register_success(self, registry: PayrollRegistry) -> None:
        inp = RegisterEmployeeInput(
            first_name="Ada",
            last_name="Obi",
            year_of_birth=1990,
            next_of_kin="Chidi",
            address="Lagos",
        )
        result = run_register(inp, registry)
        assert result.success is True
        assert result.employee is not None
        assert result.errors == ()

    def test_run_register_failure(self, registry: PayrollRegistry) -> None:
        inp = RegisterEmployeeInput(
            first_name="",
            last_name="Obi",
            year_of_birth=1990,
            next_of_kin="Chidi",
            address="Lagos",
        )
        result = run_register(inp, registry)
        assert result.success is False
        assert result.employee is None
        assert result.errors[0].field == "first_name"
        assert run_list(registry).total == 0

    def test_run_summary_empty(self, registry: PayrollRegistry) -> None:
        result = run_summary(registry)
        assert result.has_employees is False
        assert result.summary.count == 0
