"""
Rainfall component unit tests.
"""

from __future__ import annotations

import csv
import io

import pytest

from src.components.rainfall import (
    CSV_HEADER,
    UNKNOWN_REGION,
    AnalyzeRainfallInput,
    RainfallConfig,
    RainfallReport,
    analyze_rainfall,
    analyze_state,
    classify_stability,
    export_csv,
    run_analyze,
    sample_rainfall_data,
)
from src.domain.errors import EmptyInputError
from src.rules.models import WorksheetRules


@pytest.fixture
def report() -> RainfallReport:
    return analyze_rainfall(sample_rainfall_data())


# --- Per-state Tests ---


class TestAnalyzeState:
    """Test single-state statistics."""

    def test_lagos(self) -> None:
        info = analyze_state("Lagos", [12, 15, 9, 14])
        assert info.mor == 12.5
        assert info.station_count == 4
        assert info.min == 9
        assert info.max == 15
        assert info.median == 13
        assert info.std_dev == pytest.approx(2.2913, abs=1e-4)
        assert info.region == "Southern Region"
        assert info.flood_warning is True
        assert info.stability == "Moderately Stable"

    def test_threshold_is_strict(self) -> None:
        assert analyze_state("Kano", [10, 10]).flood_warning is False
        assert analyze_state("Kano", [10, 10.5]).flood_warning is True

    def test_unknown_region(self) -> None:
        assert analyze_state("Atlantis", [1]).region == UNKNOWN_REGION

    def test_empty_readings(self) -> None:
        with pytest.raises(EmptyInputError) as exc:
            analyze_state("Lagos", [])
        assert exc.value.field == "Lagos"

    @pytest.mark.parametrize(
        "std_dev,expected",
        [
            (0.0, "Very Stable"),
            (1.49, "Very Stable"),
            (1.5, "Moderately Stable"),
            (2.99, "Moderately Stable"),
            (3.0, "Unstable"),
        ],
    )
    def test_stability_bands(self, std_dev: float, expected: str) -> None:
        assert classify_stability(std_dev) == expected


# --- Report Tests ---


class TestAnalyzeRainfall:
    """Test the nationwide report."""

    def test_states_alphabetical(self, report: RainfallReport) -> None:
        assert [s.state for s in report.states] == ["Bayelsa", "Enugu", "Kano", "Lagos", "Rivers"]

    def test_flood_warnings(self, report: RainfallReport) -> None:
        assert report.flood_warning_states == ("Bayelsa", "Enugu", "Lagos", "Rivers")

    def test_national_figures(self, report: RainfallReport) -> None:
        assert report.total_rainfall == 275
        assert report.total_stations == 20
        assert report.national_mor == 13.75
        assert report.max_state_mor == 21.5
        assert report.min_state_mor == 3.5
        assert report.mor_range == 18

    def test_national_mor_weights_by_station(self) -> None:
        report = analyze_rainfall({"Lagos": [10, 10, 10], "Kano": [2]})
        assert report.national_mor == 8
        assert report.average_state_mor == 6

    def test_top_and_bottom(self, report: RainfallReport) -> None:
        assert [s.state for s in report.top_states] == ["Bayelsa", "Rivers", "Lagos", "Enugu", "Kano"]
        assert [s.state for s in report.bottom_states] == ["Kano", "Enugu", "Lagos", "Rivers", "Bayelsa"]

    def test_top_n_from_config(self) -> None:
        report = analyze_rainfall(sample_rainfall_data(), RainfallConfig(top_n=2))
        assert [s.state for s in report.top_states] == ["Bayelsa", "Rivers"]
        assert [s.state for s in report.bottom_states] == ["Kano", "Enugu"]

    def test_regions(self, report: RainfallReport) -> None:
        names = [r.region for r in report.regions]
        assert names == ["Eastern Region", "Northern Region", "Southern Region"]

        southern = report.regions[2]
        assert southern.states == ("Bayelsa", "Lagos", "Rivers")
        assert southern.warning_count == 3
        assert southern.average_mor == pytest.approx((12.5 + 19.75 + 21.5) / 3)

    def test_by_variability(self, report: RainfallReport) -> None:
        assert [s.state for s in report.by_variability] == [
            "Bayelsa",
            "Enugu",
            "Kano",
            "Rivers",
            "Lagos",
        ]

    def test_no_states(self) -> None:
        with pytest.raises(EmptyInputError):
            analyze_rainfall({})

    def test_regions_from_rules(self) -> None:
        rules = WorksheetRules.model_validate(
            {"rainfall": {"flood_threshold": 20.0, "regions": {"Coast": ["Lagos"]}}}
        )
        report = analyze_rainfall({"Lagos": [12], "Kano": [25]}, RainfallConfig.from_rules(rules))
        assert [s.region for s in report.states] == [UNKNOWN_REGION, "Coast"]
        assert report.flood_warning_states == ("Kano",)


# --- CSV Tests ---


class TestExportCsv:
    """Test CSV export."""

    def test_header_and_rows(self, report: RainfallReport) -> None:
        rows = list(csv.reader(io.StringIO(export_csv(report))))
        assert tuple(rows[0]) == CSV_HEADER
        assert len(rows) == 1 + len(report.states)

    def test_row_format(self, report: RainfallReport) -> None:
        lines = export_csv(report).splitlines()
        assert lines[0] == (
            "State,Region,MOR (mm),Min Rain (mm),Max Rain (mm),Median,Std Dev,Stations,Flooding Warning"
        )
        assert lines[3] == "Kano,Northern Region,3.50,2.00,5.00,3.50,1.12,4,NO"
        assert lines[4] == "Lagos,Southern Region,12.50,9.00,15.00,13.00,2.29,4,YES"


# --- Shell Layer Tests ---


class TestShellFunctions:
    """Test run_analyze."""

    def test_success(self) -> None:
        result = run_analyze(AnalyzeRainfallInput(readings_by_state={"Lagos": (12.0, 15.0)}))
        assert result.success is True
        assert result.report is not None

    def test_empty_state(self) -> None:
        result = run_analyze(AnalyzeRainfallInput(readings_by_state={"Lagos": ()}))
        assert result.success is False
        assert result.errors[0].code == "empty_input"
