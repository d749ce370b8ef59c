"""
Table component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.errors import ErrorDetail
from src.rules.models import WorksheetRules

TableColumn = Literal["n", "n_squared", "n_square_root", "n_cube", "n_cube_root"]

TABLE_COLUMNS: tuple[TableColumn, ...] = (
    "n",
    "n_squared",
    "n_square_root",
    "n_cube",
    "n_cube_root",
)


@dataclass(frozen=True)
class TableConfig:
    """Range limits for generated tables."""

    min_start: int = 1
    max_span: int = 100

    @classmethod
    def from_rules(cls, rules: WorksheetRules) -> TableConfig:
        return cls(min_start=rules.table.min_start, max_span=rules.table.max_span)


DEFAULT_CONFIG = TableConfig()


@dataclass(frozen=True)
class GenerateTableInput:
    """Input for generating a math table."""

    start: int
    end: int


@dataclass(frozen=True)
class TableRow:
    """Derived values for a single integer."""

    n: int
    n_squared: int
    n_square_root: float
    n_cube: int
    n_cube_root: float


@dataclass(frozen=True)
class ColumnStats:
    """Min, max and average of one table column."""

    column: TableColumn
    min: float
    max: float
    avg: float


@dataclass(frozen=True)
class MathTable:
    """Rows in ascending n plus per-column aggregates."""

    start: int
    end: int
    rows: tuple[TableRow, ...]
    column_stats: tuple[ColumnStats, ...]

    def stats_for(self, column: TableColumn) -> ColumnStats:
        for stats in self.column_stats:
            if stats.column == column:
                return stats
        raise KeyError(column)


@dataclass(frozen=True)
class GenerateTableOutput:
    table: MathTable | None
    errors: tuple[ErrorDetail, ...]
    success: bool
