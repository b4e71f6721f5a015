"""Keyword extraction by word frequency."""
from __future__ import annotations

from collections import Counter
from typing import List

from .text import KEYWORD_MIN_WORD_LENGTH, KEYWORD_STOP_WORDS, count_word_frequency

DEFAULT_KEYWORD_COUNT = 5


def extract_keywords(text: str, count: int = DEFAULT_KEYWORD_COUNT) -> List[str]:
    """Return the ``count`` most frequent keywords of ``text``.

    Words shorter than four characters and stop words (including
    interrogatives) are ignored. Ties keep first-occurrence order.
    """
    if count <= 0 or not text or not text.strip():
        return []

    frequency = Counter(
        count_word_frequency(text, KEYWORD_STOP_WORDS, KEYWORD_MIN_WORD_LENGTH)
    )
    return [word for word, _ in frequency.most_common(count)]
