"""
Weather station aggregation over a stations x readings matrix.

overall_mean is the mean of the per-station means, not the mean of every raw
reading.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.errors import InvalidDomainError, require_finite

from .models import WeatherSummary


def validate_shape(
    matrix: Sequence[Sequence[float]],
    stations: int | None = None,
    readings: int | None = None,
) -> tuple[int, int]:
    """
    Check the matrix against its declared shape.

    Returns:
        (stations, readings) actually used

    Raises:
        InvalidDomainError: declared counts < 1 or the matrix is not that shape
    """
    if stations is None:
        stations = len(matrix)
    if readings is None:
        readings = len(matrix[0]) if matrix else 0

    if stations < 1:
        raise InvalidDomainError(
            "At least one station is required", code="no_stations", field="station_count"
        )
    if readings < 1:
        raise InvalidDomainError(
            "At least one reading per station is required",
            code="no_readings",
            field="readings_per_station",
        )
    if len(matrix) != stations:
        raise InvalidDomainError(
            f"Expected {stations} stations, got {len(matrix)}",
            code="station_count_mismatch",
            field="readings",
        )
    for index, row in enumerate(matrix):
        if len(row) != readings:
            raise InvalidDomainError(
                f"Station {index + 1} has {len(row)} readings, expected {readings}",
                code="reading_count_mismatch",
                field="readings",
            )
    return stations, readings


def analyze_weather(
    matrix: Sequence[Sequence[float]],
    stations: int | None = None,
    readings: int | None = None,
) -> WeatherSummary:
    """
    Aggregate temperature readings.

    Raises:
        InvalidDomainError: see validate_shape
        NonFiniteResultError: a reading is inf or NaN, or a station sum overflows
    """
    stations, readings = validate_shape(matrix, stations, readings)

    station_means = tuple(sum(float(v) for v in row) / len(row) for row in matrix)
    for index, station_mean in enumerate(station_means):
        require_finite(station_mean, f"station_means[{index}]")
    all_readings = [float(v) for row in matrix for v in row]

    return WeatherSummary(
        station_count=stations,
        readings_per_station=readings,
        station_means=station_means,
        overall_mean=require_finite(sum(station_means) / len(station_means), "overall_mean"),
        hottest=max(all_readings),
        coldest=min(all_readings),
    )
