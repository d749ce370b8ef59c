"""
Rainfall analysis over per-state weather station readings.

Each state is summarized with the shared descriptive statistics, then the
states are ranked, grouped by region and flagged for flooding.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Mapping, Sequence

from src.components.stats import summarize
from src.domain.errors import EmptyInputError

from .models import RainfallConfig, RainfallReport, RegionRainfall, StateRainfall

CSV_HEADER = (
    "State",
    "Region",
    "MOR (mm)",
    "Min Rain (mm)",
    "Max Rain (mm)",
    "Median",
    "Std Dev",
    "Stations",
    "Flooding Warning",
)

DEFAULT_RAINFALL_CONFIG = RainfallConfig()


def sample_rainfall_data() -> dict[str, list[float]]:
    """Default data set used when no readings are supplied."""
    return {
        "Lagos": [12, 15, 9, 14],
        "Rivers": [18, 20, 22, 19],
        "Bayelsa": [22, 20, 21, 23],
        "Kano": [3, 4, 2, 5],
        "Enugu": [11, 12, 10, 13],
    }


def classify_stability(std_dev: float, config: RainfallConfig = DEFAULT_RAINFALL_CONFIG) -> str:
    if std_dev < config.very_stable_below:
        return "Very Stable"
    if std_dev < config.moderately_stable_below:
        return "Moderately Stable"
    return "Unstable"


def analyze_state(
    state: str,
    readings: Sequence[float],
    config: RainfallConfig = DEFAULT_RAINFALL_CONFIG,
) -> StateRainfall:
    """
    Summarize one state's station readings.

    Raises:
        EmptyInputError: the state has no readings
    """
    if not readings:
        raise EmptyInputError(f"State '{state}' has no station readings", field=state)

    summary = summarize(readings)
    return StateRainfall(
        state=state,
        region=config.region_of(state),
        mor=summary.mean,
        station_count=summary.count,
        min=summary.min,
        max=summary.max,
        median=summary.median,
        std_dev=summary.std_dev,
        flood_warning=summary.mean > config.flood_threshold,
        stability=classify_stability(summary.std_dev, config),
    )


def _group_regions(states: Sequence[StateRainfall]) -> tuple[RegionRainfall, ...]:
    grouped: dict[str, list[StateRainfall]] = {}
    for info in states:
        grouped.setdefault(info.region, []).append(info)

    return tuple(
        RegionRainfall(
            region=region,
            average_mor=sum(s.mor for s in members) / len(members),
            states=tuple(s.state for s in members),
            warning_count=sum(1 for s in members if s.flood_warning),
        )
        for region, members in sorted(grouped.items())
    )


def analyze_rainfall(
    readings_by_state: Mapping[str, Sequence[float]],
    config: RainfallConfig = DEFAULT_RAINFALL_CONFIG,
) -> RainfallReport:
    """
    Build the full rainfall report.

    Raises:
        EmptyInputError: no states, or a state without readings
    """
    if not readings_by_state:
        raise EmptyInputError("At least one state is required", field="readings_by_state")

    states = tuple(
        analyze_state(name, readings_by_state[name], config)
        for name in sorted(readings_by_state)
    )

    total_rainfall = sum(float(v) for name in readings_by_state for v in readings_by_state[name])
    total_stations = sum(s.station_count for s in states)
    mors = [s.mor for s in states]
    highest = max(mors)
    lowest = min(mors)

    # sorted() is stable, so equal MORs keep alphabetical order
    by_mor_desc = sorted(states, key=lambda s: s.mor, reverse=True)
    by_mor_asc = sorted(states, key=lambda s: s.mor)

    return RainfallReport(
        states=states,
        flood_warning_states=tuple(s.state for s in states if s.flood_warning),
        total_rainfall=total_rainfall,
        total_stations=total_stations,
        national_mor=total_rainfall / total_stations,
        average_state_mor=sum(mors) / len(mors),
        max_state_mor=highest,
        min_state_mor=lowest,
        mor_range=highest - lowest,
        top_states=tuple(by_mor_desc[: config.top_n]),
        bottom_states=tuple(by_mor_asc[: config.top_n]),
        regions=_group_regions(states),
        by_variability=tuple(sorted(states, key=lambda s: s.std_dev)),
    )


def export_csv(report: RainfallReport) -> str:
    """Render the per-state table as CSV text, one row per state."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for s in report.states:
        writer.writerow(
            [
                s.state,
                s.region,
                f"{s.mor:.2f}",
                f"{s.min:.2f}",
                f"{s.max:.2f}",
                f"{s.median:.2f}",
                f"{s.std_dev:.2f}",
                s.station_count,
                "YES" if s.flood_warning else "NO",
            ]
        )
    return buffer.getvalue()
