"""
Text component - Tokenization, occurrence count and word frequency ranking.
"""

from ._impl import TOKEN_PATTERN, analyze_text, rank_frequencies, tokenize, word_frequencies
from .component import run_analyze
from .models import (
    DEFAULT_CONFIG,
    AnalyzeTextInput,
    AnalyzeTextOutput,
    TextAnalysis,
    TextConfig,
    WordCount,
)

__all__ = [
    "run_analyze",
    "analyze_text",
    "tokenize",
    "word_frequencies",
    "rank_frequencies",
    "TOKEN_PATTERN",
    "AnalyzeTextInput",
    "AnalyzeTextOutput",
    "TextAnalysis",
    "WordCount",
    "TextConfig",
    "DEFAULT_CONFIG",
]
