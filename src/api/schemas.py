from collections.abc import Sequence
from typing import Any

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict

from src.domain.errors import ErrorDetail


# --- Errors ---
class ErrorItem(BaseModel):
    code: str
    message: str
    field: str | None = None


class ErrorBody(BaseModel):
    code: str
    message: str
    errors: list[ErrorItem]


class ErrorResponse(BaseModel):
    """Body of every 400 response."""

    detail: ErrorBody


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Input rejected by the worksheet"},
}


def domain_error(errors: Sequence[ErrorDetail]) -> HTTPException:
    """Convert component errors into a 400 with a structured detail body."""
    if len(errors) == 1:
        code = errors[0].code
    else:
        code = "validation_failed"
    body = ErrorBody(
        code=code,
        message="; ".join(e.message for e in errors),
        errors=[ErrorItem(code=e.code, message=e.message, field=e.field) for e in errors],
    )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=body.model_dump())


# --- Shared Requests ---
class FiniteRequest(BaseModel):
    """Base for numeric request bodies; "nan", "inf" and "-inf" are rejected with 422."""

    model_config = ConfigDict(allow_inf_nan=False)


class ValuesRequest(FiniteRequest):
    values: list[float]
