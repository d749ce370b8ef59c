"""
Text component - Word occurrence and frequency analysis.

Shell Layer - converts domain errors into output error lists.
"""

from __future__ import annotations

from src.domain.errors import WorksheetError

from ._impl import analyze_text
from .models import DEFAULT_CONFIG, AnalyzeTextInput, AnalyzeTextOutput, TextConfig


def run_analyze(
    input_data: AnalyzeTextInput,
    config: TextConfig = DEFAULT_CONFIG,
) -> AnalyzeTextOutput:
    """Analyze text for a target word."""
    try:
        analysis = analyze_text(input_data.text, input_data.target_word, config)
    except WorksheetError as e:
        return AnalyzeTextOutput(analysis=None, errors=e.details(), success=False)
    return AnalyzeTextOutput(analysis=analysis, errors=(), success=True)
