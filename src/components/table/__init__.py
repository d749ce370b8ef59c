"""
Table component - n, n², √n, n³, ∛n rows with column aggregates.
"""

from ._impl import build_row, column_stats, generate_range, real_cube_root, validate_range
from .component import run_generate
from .models import (
    DEFAULT_CONFIG,
    TABLE_COLUMNS,
    ColumnStats,
    GenerateTableInput,
    GenerateTableOutput,
    MathTable,
    TableColumn,
    TableConfig,
    TableRow,
)

__all__ = [
    "run_generate",
    "generate_range",
    "validate_range",
    "build_row",
    "column_stats",
    "real_cube_root",
    "GenerateTableInput",
    "GenerateTableOutput",
    "MathTable",
    "TableRow",
    "ColumnStats",
    "TableColumn",
    "TABLE_COLUMNS",
    "TableConfig",
    "DEFAULT_CONFIG",
]
