"""
Weather component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ErrorDetail


@dataclass(frozen=True)
class AnalyzeWeatherInput:
    """
    Station readings, one row per station.

    station_count / readings_per_station are the declared shape; when None
    the shape of the matrix itself is used.
    """

    readings: tuple[tuple[float, ...], ...]
    station_count: int | None = None
    readings_per_station: int | None = None


@dataclass(frozen=True)
class WeatherSummary:
    """Per-station means, the mean of those means, and the extremes."""

    station_count: int
    readings_per_station: int
    station_means: tuple[float, ...]
    overall_mean: float
    hottest: float
    coldest: float


@dataclass(frozen=True)
class AnalyzeWeatherOutput:
    summary: WeatherSummary | None
    errors: tuple[ErrorDetail, ...]
    success: bool
