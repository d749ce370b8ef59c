"""
Table component - Math table over an integer range.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import generate_range
from .models import DEFAULT_CONFIG, GenerateTableInput, GenerateTableOutput, TableConfig


def run_generate(
    input_data: GenerateTableInput,
    config: TableConfig = DEFAULT_CONFIG,
) -> GenerateTableOutput:
    """Generate a math table."""
    try:
        table = generate_range(input_data.start, input_data.end, config)
    except WorksheetError as e:
        return GenerateTableOutput(table=None, errors=e.details(), success=False)
    return GenerateTableOutput(table=table, errors=(), success=True)
