"""
Payroll component - Append-only employee registry with payroll derivation.
"""

from ._impl import (
    InMemoryEmployeeRepo,
    PayrollRegistry,
    build_record,
    config_from_rules,
    create_payroll_registry,
    parse_year,
    summarize_records,
    validate_registration,
)
from .component import run_list, run_register, run_summary
from .models import (
    DEFAULT_CONFIG,
    EmployeeListOutput,
    EmployeeRecord,
    PayrollConfig,
    PayrollSummary,
    PayrollSummaryOutput,
    RegisterEmployeeInput,
    RegisterEmployeeOutput,
)
from .ports import EmployeeRepoPort

__all__ = [
    # Entry points
    "run_register",
    "run_list",
    "run_summary",
    # Registry
    "PayrollRegistry",
    "InMemoryEmployeeRepo",
    "create_payroll_registry",
    "config_from_rules",
    "validate_registration",
    "build_record",
    "summarize_records",
    "parse_year",
    # Models
    "EmployeeRecord",
    "PayrollSummary",
    "PayrollConfig",
    "DEFAULT_CONFIG",
    "RegisterEmployeeInput",
    "RegisterEmployeeOutput",
    "EmployeeListOutput",
    "PayrollSummaryOutput",
    # Ports
    "EmployeeRepoPort",
]
