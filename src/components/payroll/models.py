"""
Payroll component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ErrorDetail

# --- Configuration ---


@dataclass(frozen=True)
class PayrollConfig:
    """Payroll constants."""

    current_year: int = 2026
    gross_pay: float = 100000
    retirement_age: int = 65
    min_birth_year: int = 1950
    max_birth_year: int = 2010
    tax_rate: float = 0.125
    pension_rate: float = 0.075
    health_rate: float = 0.05
    housing_rate: float = 0.05


DEFAULT_CONFIG = PayrollConfig()


# --- Entities ---


@dataclass(frozen=True)
class EmployeeRecord:
    """
    A registered employee with derived age, retirement and payroll fields.

    Invariant: net_pay == gross_pay - total_deductions, and every deduction is
    gross_pay times its fixed rate.
    """

    employee_number: int
    first_name: str
    last_name: str
    year_of_birth: int
    age: int
    next_of_kin: str
    address: str
    retirement_year: int
    gross_pay: float
    tax_deduction: float
    pension_deduction: float
    health_deduction: float
    housing_deduction: float
    net_pay: float

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def total_deductions(self) -> float:
        return (
            self.tax_deduction
            + self.pension_deduction
            + self.health_deduction
            + self.housing_deduction
        )


@dataclass(frozen=True)
class PayrollSummary:
    """Aggregate payroll over all registered employees."""

    count: int
    total_gross: float
    total_deductions: float
    total_net: float


# --- Input Models ---


@dataclass(frozen=True)
class RegisterEmployeeInput:
    """Input for registering an employee."""

    first_name: str
    last_name: str
    year_of_birth: int | str
    next_of_kin: str
    address: str


# --- Output Models ---


@dataclass(frozen=True)
class RegisterEmployeeOutput:
    employee: EmployeeRecord | None
    errors: tuple[ErrorDetail, ...]
    success: bool


@dataclass(frozen=True)
class EmployeeListOutput:
    employees: tuple[EmployeeRecord, ...]
    total: int


@dataclass(frozen=True)
class PayrollSummaryOutput:
    summary: PayrollSummary
    has_employees: bool
