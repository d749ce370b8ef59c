"""
Rainfall API.

Per-state MOR, flood warnings and regional grouping. An empty request body
(no readings) analyzes the built-in sample data set.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from src.api.deps import get_rainfall_config
from src.api.schemas import ERROR_RESPONSES, FiniteRequest, domain_error
from src.components.rainfall import (
    AnalyzeRainfallInput,
    RainfallConfig,
    RainfallReport,
    export_csv,
    run_analyze,
    sample_rainfall_data,
)

router = APIRouter()
logger = logging.getLogger(__name__)

CSV_FILENAME = "rainfall_report.csv"


class RainfallRequest(FiniteRequest):
    readings_by_state: dict[str, list[float]] | None = None


def build_report(request: RainfallRequest, config: RainfallConfig) -> RainfallReport:
    readings = request.readings_by_state
    if readings is None:
        readings = sample_rainfall_data()

    output = run_analyze(
        AnalyzeRainfallInput(
            readings_by_state={state: tuple(values) for state, values in readings.items()}
        ),
        config,
    )
    if output.report is None:
        logger.warning("rainfall analysis rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.report


@router.post("/analyze", response_model=RainfallReport, responses=ERROR_RESPONSES)
def analyze(
    request: RainfallRequest,
    config: RainfallConfig = Depends(get_rainfall_config),
) -> RainfallReport:
    return build_report(request, config)


@router.post(
    "/export",
    response_class=StreamingResponse,
    responses={200: {"content": {"text/csv": {}}}, **ERROR_RESPONSES},
    summary="Export rainfall report to CSV",
)
def export(
    request: RainfallRequest,
    config: RainfallConfig = Depends(get_rainfall_config),
) -> StreamingResponse:
    """Per-state table as a CSV attachment."""
    report = build_report(request, config)
    return StreamingResponse(
        iter([export_csv(report)]),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
