"""
Payroll API.

Registers employees into the process-wide registry and reports the payroll.
Records exist only for the lifetime of the server process.
"""

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.deps import get_payroll_registry
from src.api.schemas import ERROR_RESPONSES, domain_error
from src.components.payroll import (
    EmployeeRecord,
    PayrollRegistry,
    RegisterEmployeeInput,
    run_list,
    run_register,
    run_summary,
)

router = APIRouter()
logger = logging.getLogger(__name__)


# --- Request/Response Models ---


class RegisterEmployeeRequest(BaseModel):
    first_name: str
    last_name: str
    year_of_birth: int | str
    next_of_kin: str
    address: str


class EmployeeResponse(BaseModel):
    employee_number: int
    first_name: str
    last_name: str
    full_name: str
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
    total_deductions: float
    net_pay: float


class EmployeeListResponse(BaseModel):
    employees: list[EmployeeResponse]
    total: int


class PayrollSummaryResponse(BaseModel):
    count: int
    total_gross: float
    total_deductions: float
    total_net: float
    has_employees: bool


# --- Helper Functions ---


def employee_to_response(employee: EmployeeRecord) -> EmployeeResponse:
    return EmployeeResponse(
        employee_number=employee.employee_number,
        first_name=employee.first_name,
        last_name=employee.last_name,
        full_name=employee.full_name,
        year_of_birth=employee.year_of_birth,
        age=employee.age,
        next_of_kin=employee.next_of_kin,
        address=employee.address,
        retirement_year=employee.retirement_year,
        gross_pay=employee.gross_pay,
        tax_deduction=employee.tax_deduction,
        pension_deduction=employee.pension_deduction,
        health_deduction=employee.health_deduction,
        housing_deduction=employee.housing_deduction,
        total_deductions=employee.total_deductions,
        net_pay=employee.net_pay,
    )


# --- Endpoints ---


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def register_employee(
    request: RegisterEmployeeRequest,
    registry: PayrollRegistry = Depends(get_payroll_registry),
) -> EmployeeResponse:
    """
    Register an employee.

    Returns 400 listing every invalid field; the registry is unchanged on
    failure.
    """
    output = run_register(
        RegisterEmployeeInput(
            first_name=request.first_name,
            last_name=request.last_name,
            year_of_birth=request.year_of_birth,
            next_of_kin=request.next_of_kin,
            address=request.address,
        ),
        registry,
    )
    if output.employee is None:
        logger.warning("employee registration rejected: %d error(s)", len(output.errors))
        raise domain_error(output.errors)

    logger.info("Registered employee #%d", output.employee.employee_number)
    return employee_to_response(output.employee)


@router.get("/employees", response_model=EmployeeListResponse)
def list_employees(
    registry: PayrollRegistry = Depends(get_payroll_registry),
) -> EmployeeListResponse:
    output = run_list(registry)
    return EmployeeListResponse(
        employees=[employee_to_response(e) for e in output.employees],
        total=output.total,
    )


@router.get("/summary", response_model=PayrollSummaryResponse)
def payroll_summary(
    registry: PayrollRegistry = Depends(get_payroll_registry),
) -> PayrollSummaryResponse:
    output = run_summary(registry)
    return PayrollSummaryResponse(
        count=output.summary.count,
        total_gross=output.summary.total_gross,
        total_deductions=output.summary.total_deductions,
        total_net=output.summary.total_net,
        has_employees=output.has_employees,
    )
