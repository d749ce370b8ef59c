"""
PayrollRegistry - Employee registration and payroll aggregation.

Holds an ordered, append-only collection of EmployeeRecord for the lifetime
of the registry instance. Nothing is persisted.

Key behaviors:
- register() is the only mutator; a failed registration leaves state untouched
- list_employees() and summarize() are read-only and repeatable
- gross pay and deduction rates are fixed per registry (PayrollConfig)
"""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

from src.domain.errors import ErrorDetail, ValidationError

from .models import DEFAULT_CONFIG, EmployeeRecord, PayrollConfig, PayrollSummary
from .ports import EmployeeRepoPort

if TYPE_CHECKING:
    from src.rules.models import WorksheetRules

YEAR_PATTERN = re.compile(r"^-?\d+$")

TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "First name"),
    ("last_name", "Last name"),
    ("next_of_kin", "Next of kin"),
    ("address", "Address"),
)


# --- In-memory repository ---


class InMemoryEmployeeRepo:
    """Process-lifetime employee storage."""

    def __init__(self) -> None:
        self._records: list[EmployeeRecord] = []

    def append(self, record: EmployeeRecord) -> EmployeeRecord:
        self._records.append(record)
        return record

    def get_all(self) -> list[EmployeeRecord]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)


# --- Validation ---


def parse_year(value: int | str | None) -> int | None:
    """Year of birth as int, or None when it is not a whole number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and YEAR_PATTERN.match(value.strip()):
        return int(value.strip())
    return None


def validate_registration(
    first_name: str,
    last_name: str,
    year_of_birth: int | str | None,
    next_of_kin: str,
    address: str,
    config: PayrollConfig = DEFAULT_CONFIG,
) -> list[ErrorDetail]:
    """Return every problem with a registration form; empty means valid."""
    errors: list[ErrorDetail] = []
    values = {
        "first_name": first_name,
        "last_name": last_name,
        "next_of_kin": next_of_kin,
        "address": address,
    }

    for field, label in TEXT_FIELDS:
        value = values[field]
        if value is None or not str(value).strip():
            errors.append(
                ErrorDetail(code="required", message=f"{label} is required", field=field)
            )

    if year_of_birth is None or (isinstance(year_of_birth, str) and not year_of_birth.strip()):
        errors.append(
            ErrorDetail(code="required", message="Year of birth is required", field="year_of_birth")
        )
        return errors

    year = parse_year(year_of_birth)
    if year is None:
        errors.append(
            ErrorDetail(
                code="year_invalid",
                message="Year of birth must be a whole number",
                field="year_of_birth",
            )
        )
    elif not config.min_birth_year <= year <= config.max_birth_year:
        errors.append(
            ErrorDetail(
                code="year_out_of_range",
                message=(
                    f"Year of birth must be between {config.min_birth_year} "
                    f"and {config.max_birth_year}"
                ),
                field="year_of_birth",
            )
        )

    return errors


# --- Payroll computation ---


def build_record(
    employee_number: int,
    first_name: str,
    last_name: str,
    year_of_birth: int,
    next_of_kin: str,
    address: str,
    config: PayrollConfig = DEFAULT_CONFIG,
) -> EmployeeRecord:
    """Derive age, retirement year and payroll for an already-validated form."""
    gross = config.gross_pay
    tax = gross * config.tax_rate
    pension = gross * config.pension_rate
    health = gross * config.health_rate
    housing = gross * config.housing_rate

    return EmployeeRecord(
        employee_number=employee_number,
        first_name=str(first_name).strip(),
        last_name=str(last_name).strip(),
        year_of_birth=year_of_birth,
        age=config.current_year - year_of_birth,
        next_of_kin=str(next_of_kin).strip(),
        address=str(address).strip(),
        retirement_year=year_of_birth + config.retirement_age,
        gross_pay=gross,
        tax_deduction=tax,
        pension_deduction=pension,
        health_deduction=health,
        housing_deduction=housing,
        net_pay=gross - (tax + pension + health + housing),
    )


def summarize_records(records: Sequence[EmployeeRecord]) -> PayrollSummary:
    return PayrollSummary(
        count=len(records),
        total_gross=sum((r.gross_pay for r in records), 0.0),
        total_deductions=sum((r.total_deductions for r in records), 0.0),
        total_net=sum((r.net_pay for r in records), 0.0),
    )


# --- Registry ---


class PayrollRegistry:
    """
    Append-only employee registry.

    One instance per session; callers receive it by reference. A lock
    serializes register() against reads so the registry can be shared by a
    threaded host.
    """

    def __init__(
        self,
        repo: EmployeeRepoPort | None = None,
        config: PayrollConfig = DEFAULT_CONFIG,
    ) -> None:
        self.repo = repo if repo is not None else InMemoryEmployeeRepo()
        self.config = config
        self._lock = threading.Lock()

    def register(
        self,
        first_name: str,
        last_name: str,
        year_of_birth: int | str,
        next_of_kin: str,
        address: str,
    ) -> EmployeeRecord:
        """
        Validate, derive payroll fields and append a new employee.

        Raises:
            ValidationError: a field is blank or the year of birth is out of range
        """
        errors = validate_registration(
            first_name, last_name, year_of_birth, next_of_kin, address, self.config
        )
        year = parse_year(year_of_birth)
        if errors or year is None:
            raise ValidationError(errors)

        with self._lock:
            record = build_record(
                employee_number=self.repo.count() + 1,
                first_name=first_name,
                last_name=last_name,
                year_of_birth=year,
                next_of_kin=next_of_kin,
                address=address,
                config=self.config,
            )
            return self.repo.append(record)

    def list_employees(self) -> tuple[EmployeeRecord, ...]:
        """All employees in registration order; empty when none registered."""
        with self._lock:
            return tuple(self.repo.get_all())

    def summarize(self) -> PayrollSummary:
        """Totals over all employees; zeros when none registered."""
        return summarize_records(self.list_employees())

    def __len__(self) -> int:
        with self._lock:
            return self.repo.count()


def config_from_rules(rules: WorksheetRules) -> PayrollConfig:
    payroll = rules.payroll
    return PayrollConfig(
        current_year=payroll.current_year,
        gross_pay=payroll.gross_pay,
        retirement_age=payroll.retirement_age,
        min_birth_year=payroll.min_birth_year,
        max_birth_year=payroll.max_birth_year,
        tax_rate=payroll.rates.tax,
        pension_rate=payroll.rates.pension,
        health_rate=payroll.rates.health,
        housing_rate=payroll.rates.housing,
    )


def create_payroll_registry(
    rules: WorksheetRules | None = None,
    repo: EmployeeRepoPort | None = None,
) -> PayrollRegistry:
    """Factory for a registry configured from the worksheet rules."""
    config = config_from_rules(rules) if rules is not None else DEFAULT_CONFIG
    return PayrollRegistry(repo=repo, config=config)
