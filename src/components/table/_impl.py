"""
Math table generation: n, n², √n, n³, ∛n over an integer range.
"""

from __future__ import annotations

import math

from src.domain.errors import InvalidDomainError

from .models import (
    DEFAULT_CONFIG,
    TABLE_COLUMNS,
    ColumnStats,
    MathTable,
    TableConfig,
    TableRow,
)


def real_cube_root(x: float) -> float:
    """Sign-preserving real cube root."""
    return math.cbrt(x)


def validate_range(start: int, end: int, config: TableConfig = DEFAULT_CONFIG) -> None:
    """
    Raises:
        InvalidDomainError: start < min_start, end < start, or the span exceeds max_span
    """
    for name, value in (("start", start), ("end", end)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDomainError(
                f"'{name}' must be an integer", code="not_an_integer", field=name
            )
    if start < config.min_start:
        raise InvalidDomainError(
            f"Start must be at least {config.min_start}", code="start_too_small", field="start"
        )
    if end < start:
        raise InvalidDomainError(
            "End must not be less than start", code="end_before_start", field="end"
        )
    if end - start > config.max_span:
        raise InvalidDomainError(
            f"Range may span at most {config.max_span} numbers",
            code="range_too_large",
            field="end",
        )


def build_row(n: int) -> TableRow:
    return TableRow(
        n=n,
        n_squared=n * n,
        n_square_root=math.sqrt(n),
        n_cube=n * n * n,
        n_cube_root=real_cube_root(n),
    )


def column_stats(rows: tuple[TableRow, ...]) -> tuple[ColumnStats, ...]:
    """Min/max/avg for each of the five columns."""
    stats = []
    for column in TABLE_COLUMNS:
        values = [getattr(row, column) for row in rows]
        stats.append(
            ColumnStats(
                column=column,
                min=min(values),
                max=max(values),
                avg=sum(values) / len(values),
            )
        )
    return tuple(stats)


def generate_range(start: int, end: int, config: TableConfig = DEFAULT_CONFIG) -> MathTable:
    """
    Generate rows for every integer in [start, end].

    Raises:
        InvalidDomainError: see validate_range
    """
    validate_range(start, end, config)
    rows = tuple(build_row(n) for n in range(start, end + 1))
    return MathTable(start=start, end=end, rows=rows, column_stats=column_stats(rows))
