"""
Weather component - Station means and extremes.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import analyze_weather
from .models import AnalyzeWeatherInput, AnalyzeWeatherOutput


def run_analyze(input_data: AnalyzeWeatherInput) -> AnalyzeWeatherOutput:
    """Aggregate a station readings matrix."""
    try:
        summary = analyze_weather(
            input_data.readings,
            stations=input_data.station_count,
            readings=input_data.readings_per_station,
        )
    except WorksheetError as e:
        return AnalyzeWeatherOutput(summary=None, errors=e.details(), success=False)
    return AnalyzeWeatherOutput(summary=summary, errors=(), success=True)
