"""
Text component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ErrorDetail
from src.rules.models import WorksheetRules


@dataclass(frozen=True)
class TextConfig:
    """Text analysis configuration."""

    top_n: int = 10

    @classmethod
    def from_rules(cls, rules: WorksheetRules) -> TextConfig:
        return cls(top_n=rules.text.top_n)


DEFAULT_CONFIG = TextConfig()


@dataclass(frozen=True)
class AnalyzeTextInput:
    """Input for word analysis."""

    text: str
    target_word: str


@dataclass(frozen=True)
class WordCount:
    """A token and how often it occurs."""

    word: str
    count: int


@dataclass(frozen=True)
class TextAnalysis:
    """Result of a word analysis."""

    target_word: str
    occurrences: int
    frequency_table: tuple[WordCount, ...]
    unique_word_count: int
    total_words: int


@dataclass(frozen=True)
class AnalyzeTextOutput:
    analysis: TextAnalysis | None
    errors: tuple[ErrorDetail, ...]
    success: bool
