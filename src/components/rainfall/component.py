"""
Rainfall component - Per-state rainfall analysis.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import DEFAULT_RAINFALL_CONFIG, analyze_rainfall
from .models import AnalyzeRainfallInput, AnalyzeRainfallOutput, RainfallConfig


def run_analyze(
    input_data: AnalyzeRainfallInput,
    config: RainfallConfig = DEFAULT_RAINFALL_CONFIG,
) -> AnalyzeRainfallOutput:
    """Analyze rainfall readings for every state."""
    try:
        report = analyze_rainfall(input_data.readings_by_state, config)
    except WorksheetError as e:
        return AnalyzeRainfallOutput(report=None, errors=e.details(), success=False)
    return AnalyzeRainfallOutput(report=report, errors=(), success=True)
