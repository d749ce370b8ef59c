"""
Rainfall component - State rainfall statistics, flood warnings and CSV export.
"""

from ._impl import (
    CSV_HEADER,
    DEFAULT_RAINFALL_CONFIG,
    analyze_rainfall,
    analyze_state,
    classify_stability,
    export_csv,
    sample_rainfall_data,
)
from .component import run_analyze
from .models import (
    UNKNOWN_REGION,
    AnalyzeRainfallInput,
    AnalyzeRainfallOutput,
    RainfallConfig,
    RainfallReport,
    RegionRainfall,
    StateRainfall,
)

__all__ = [
    # Entry points
    "run_analyze",
    # Functional core
    "analyze_rainfall",
    "analyze_state",
    "classify_stability",
    "export_csv",
    "sample_rainfall_data",
    "CSV_HEADER",
    # Models
    "AnalyzeRainfallInput",
    "AnalyzeRainfallOutput",
    "RainfallConfig",
    "DEFAULT_RAINFALL_CONFIG",
    "RainfallReport",
    "RegionRainfall",
    "StateRainfall",
    "UNKNOWN_REGION",
]
