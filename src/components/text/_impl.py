"""
Word tokenization and frequency analysis.

Tokens are maximal runs of ASCII letters in the lowercased text; every
other character separates tokens.
"""

from __future__ import annotations

import re
from collections import Counter

from src.domain.errors import EmptyInputError

from .models import DEFAULT_CONFIG, TextAnalysis, TextConfig, WordCount

TOKEN_PATTERN = re.compile(r"[a-z]+")


def tokenize(text: str) -> list[str]:
    """Lowercase the text and extract runs of ASCII letters."""
    return TOKEN_PATTERN.findall(text.lower())


def word_frequencies(tokens: list[str]) -> Counter[str]:
    """Count tokens; iteration order is first-seen order."""
    return Counter(tokens)


def rank_frequencies(frequencies: Counter[str], limit: int) -> tuple[WordCount, ...]:
    """Descending by count; equal counts keep first-seen order."""
    # sorted() is stable and Counter preserves insertion order
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return tuple(WordCount(word=w, count=c) for w, c in ranked[:limit])


def analyze_text(
    text: str,
    target_word: str,
    config: TextConfig = DEFAULT_CONFIG,
) -> TextAnalysis:
    """
    Count occurrences of target_word and rank the most frequent words.

    Raises:
        EmptyInputError: text or target_word is blank after trimming
    """
    text = (text or "").strip()
    target = (target_word or "").strip().lower()

    if not text:
        raise EmptyInputError("Text is required", field="text")
    if not target:
        raise EmptyInputError("Target word is required", field="target_word")

    tokens = tokenize(text)
    frequencies = word_frequencies(tokens)

    return TextAnalysis(
        target_word=target,
        occurrences=frequencies.get(target, 0),
        frequency_table=rank_frequencies(frequencies, config.top_n),
        unique_word_count=len(frequencies),
        total_words=len(tokens),
    )
