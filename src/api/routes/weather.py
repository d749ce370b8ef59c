"""
Weather API - per-station temperature means and extremes.
"""

import logging

from fastapi import APIRouter

from src.api.schemas import ERROR_RESPONSES, FiniteRequest, domain_error
from src.components.weather import AnalyzeWeatherInput, WeatherSummary, run_analyze

router = APIRouter()
logger = logging.getLogger(__name__)


class AnalyzeWeatherRequest(FiniteRequest):
    readings: list[list[float]]
    station_count: int | None = None
    readings_per_station: int | None = None


@router.post("/analyze", response_model=WeatherSummary, responses=ERROR_RESPONSES)
def analyze(request: AnalyzeWeatherRequest) -> WeatherSummary:
    output = run_analyze(
        AnalyzeWeatherInput(
            readings=tuple(tuple(row) for row in request.readings),
            station_count=request.station_count,
            readings_per_station=request.readings_per_station,
        )
    )
    if output.summary is None:
        logger.warning("weather analysis rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.summary
