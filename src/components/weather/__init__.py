"""
Weather component - Per-station and overall temperature aggregation.
"""

from ._impl import analyze_weather, validate_shape
from .component import run_analyze
from .models import AnalyzeWeatherInput, AnalyzeWeatherOutput, WeatherSummary

__all__ = [
    "run_analyze",
    "analyze_weather",
    "validate_shape",
    "AnalyzeWeatherInput",
    "AnalyzeWeatherOutput",
    "WeatherSummary",
]
