"""
Table API - n, n², √n, n³ and ∛n for an integer range.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.deps import get_table_config
from src.api.schemas import ERROR_RESPONSES, domain_error
from src.components.table import GenerateTableInput, MathTable, TableConfig, run_generate

router = APIRouter()
logger = logging.getLogger(__name__)


class TableRequest(BaseModel):
    start: int
    end: int


@router.post("", response_model=MathTable, responses=ERROR_RESPONSES)
def generate(
    request: TableRequest,
    config: TableConfig = Depends(get_table_config),
) -> MathTable:
    output = run_generate(GenerateTableInput(start=request.start, end=request.end), config)
    if output.table is None:
        logger.warning("table rejected: start=%s end=%s", request.start, request.end)
        raise domain_error(output.errors)
    return output.table
