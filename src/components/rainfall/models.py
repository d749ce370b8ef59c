"""
Rainfall component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.errors import ErrorDetail
from src.rules.models import DEFAULT_REGIONS, WorksheetRules

UNKNOWN_REGION = "Unknown Region"


# --- Configuration ---


@dataclass(frozen=True)
class RainfallConfig:
    """Thresholds and region lookup for rainfall analysis."""

    flood_threshold: float = 10.0
    very_stable_below: float = 1.5
    moderately_stable_below: float = 3.0
    top_n: int = 5
    regions: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: {name: tuple(states) for name, states in DEFAULT_REGIONS.items()}
    )

    def region_of(self, state: str) -> str:
        for region, states in self.regions.items():
            if state in states:
                return region
        return UNKNOWN_REGION

    @classmethod
    def from_rules(cls, rules: WorksheetRules) -> RainfallConfig:
        rainfall = rules.rainfall
        return cls(
            flood_threshold=rainfall.flood_threshold,
            very_stable_below=rainfall.stability.very_stable_below,
            moderately_stable_below=rainfall.stability.moderately_stable_below,
            top_n=rainfall.top_n,
            regions={name: tuple(states) for name, states in rainfall.regions.items()},
        )


# --- Input Models ---


@dataclass(frozen=True)
class AnalyzeRainfallInput:
    """Daily station readings (mm) keyed by state name."""

    readings_by_state: dict[str, tuple[float, ...]]


# --- Results ---


@dataclass(frozen=True)
class StateRainfall:
    """Per-state rainfall statistics. MOR is the mean of the station readings."""

    state: str
    region: str
    mor: float
    station_count: int
    min: float
    max: float
    median: float
    std_dev: float
    flood_warning: bool
    stability: str


@dataclass(frozen=True)
class RegionRainfall:
    region: str
    average_mor: float
    states: tuple[str, ...]
    warning_count: int


@dataclass(frozen=True)
class RainfallReport:
    """
    Nationwide rainfall analysis.

    national_mor is total rainfall over total stations, so states with more
    stations weigh more than in average_state_mor.
    """

    states: tuple[StateRainfall, ...]
    flood_warning_states: tuple[str, ...]
    total_rainfall: float
    total_stations: int
    national_mor: float
    average_state_mor: float
    max_state_mor: float
    min_state_mor: float
    mor_range: float
    top_states: tuple[StateRainfall, ...]
    bottom_states: tuple[StateRainfall, ...]
    regions: tuple[RegionRainfall, ...]
    by_variability: tuple[StateRainfall, ...]


# --- Output Models ---


@dataclass(frozen=True)
class AnalyzeRainfallOutput:
    report: RainfallReport | None
    errors: tuple[ErrorDetail, ...]
    success: bool
