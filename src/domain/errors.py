"""
Worksheet error types.

Every component raises one of these synchronously to its caller. The shell
layer (component ``run_*`` functions, API routes, CLI) converts them into
``ErrorDetail`` values or HTTP responses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error with actionable message."""

    code: str
    message: str
    field: str | None = None


class WorksheetError(Exception):
    """Base worksheet error."""

    default_code = "worksheet_error"

    def __init__(self, message: str, code: str | None = None, field: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code
        self.field = field
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message, field=self.field)

    def details(self) -> tuple[ErrorDetail, ...]:
        return (self.to_detail(),)


class InvalidDomainError(WorksheetError):
    """Input is out of range or the operation is mathematically undefined."""

    default_code = "invalid_domain"


class DivisionByZeroError(InvalidDomainError):
    """Division or modulo by zero."""

    default_code = "division_by_zero"


class NonFiniteResultError(InvalidDomainError):
    """A computation on finite inputs overflowed to inf or produced NaN."""

    default_code = "non_finite_result"


def require_finite(value: float, field: str) -> float:
    """Return value unchanged, or raise NonFiniteResultError for inf/NaN."""
    if not math.isfinite(value):
        raise NonFiniteResultError(f"Result for '{field}' is not a finite number", field=field)
    return value


class EmptyInputError(WorksheetError):
    """Required text is blank or a numeric sequence is empty."""

    default_code = "empty_input"


class ValidationError(WorksheetError):
    """Form-level validation failed (employee registration)."""

    default_code = "validation_failed"

    def __init__(self, errors: list[ErrorDetail]) -> None:
        self.errors = tuple(errors)
        message = "; ".join(e.message for e in errors) or "Validation failed"
        field = errors[0].field if len(errors) == 1 else None
        super().__init__(message, field=field)

    def details(self) -> tuple[ErrorDetail, ...]:
        return self.errors
