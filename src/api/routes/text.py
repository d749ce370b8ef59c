"""
Text API - word occurrence and frequency analysis.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.deps import get_text_config
from src.api.schemas import ERROR_RESPONSES, domain_error
from src.components.text import AnalyzeTextInput, TextAnalysis, TextConfig, run_analyze

router = APIRouter()
logger = logging.getLogger(__name__)


class AnalyzeTextRequest(BaseModel):
    text: str
    target_word: str


@router.post("/analyze", response_model=TextAnalysis, responses=ERROR_RESPONSES)
def analyze(
    request: AnalyzeTextRequest,
    config: TextConfig = Depends(get_text_config),
) -> TextAnalysis:
    """Count the target word and rank word frequencies (case-insensitive)."""
    output = run_analyze(
        AnalyzeTextInput(text=request.text, target_word=request.target_word), config
    )
    if output.analysis is None:
        logger.warning("text analysis rejected: %s", output.errors[0].code)
        raise domain_error(output.errors)
    return output.analysis
