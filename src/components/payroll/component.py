"""
Payroll component - Employee registry and payroll summary.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import PayrollRegistry
from .models import (
    EmployeeListOutput,
    PayrollSummaryOutput,
    RegisterEmployeeInput,
    RegisterEmployeeOutput,
)


def run_register(
    input_data: RegisterEmployeeInput,
    registry: PayrollRegistry,
) -> RegisterEmployeeOutput:
    """Register a new employee."""
    try:
        employee = registry.register(
            first_name=input_data.first_name,
            last_name=input_data.last_name,
            year_of_birth=input_data.year_of_birth,
            next_of_kin=input_data.next_of_kin,
            address=input_data.address,
        )
    except WorksheetError as e:
        return RegisterEmployeeOutput(employee=None, errors=e.details(), success=False)

    return RegisterEmployeeOutput(employee=employee, errors=(), success=True)


def run_list(registry: PayrollRegistry) -> EmployeeListOutput:
    """List all employees."""
    employees = registry.list_employees()
    return EmployeeListOutput(employees=employees, total=len(employees))


def run_summary(registry: PayrollRegistry) -> PayrollSummaryOutput:
    """Aggregate payroll over all employees."""
    summary = registry.summarize()
    return PayrollSummaryOutput(summary=summary, has_employees=summary.count > 0)
