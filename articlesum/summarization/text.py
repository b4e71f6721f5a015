"""Sentence splitting and word-frequency counting."""
from __future__ import annotations

import re
from typing import Dict, FrozenSet, List

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_NON_WORD_RE = re.compile(r"[^\w\s]")

GENERAL_MIN_WORD_LENGTH = 3
KEYWORD_MIN_WORD_LENGTH = 4

GENERAL_STOP_WORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "should", "could", "may", "might", "must", "can", "this", "that",
        "these", "those", "it", "its", "they", "them", "their", "there",
        "then", "than",
    }
)

KEYWORD_STOP_WORDS: FrozenSet[str] = GENERAL_STOP_WORDS | frozenset(
    {"what", "which", "who", "when", "where", "why", "how"}
)


def split_sentences(text: str) -> List[str]:
    """Split text into sentences on terminal punctuation.

    Whitespace runs collapse to a single space, and a break happens after
    ``.``, ``!`` or ``?`` followed by whitespace. Text without terminal
    punctuation is one sentence; blank text has none.
    """
    if not text:
        return []

    cleaned = _WHITESPACE_RE.sub(" ", text).strip()
    if not cleaned:
        return []

    return [s.strip() for s in _SENTENCE_BOUNDARY_RE.split(cleaned) if s.strip()]


def normalize_words(text: str) -> List[str]:
    """Lowercase, strip punctuation and split into words."""
    normalized = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", normalized).strip().split()


def count_word_frequency(
    text: str,
    stop_words: FrozenSet[str] = GENERAL_STOP_WORDS,
    min_length: int = GENERAL_MIN_WORD_LENGTH,
) -> Dict[str, int]:
    """Count normalized words, skipping stop words and short words.

    Args:
        text: Input text
        stop_words: Words to exclude
        min_length: Minimum word length to count

    Returns:
        Mapping of word to occurrence count, in first-seen order
    """
    frequency: Dict[str, int] = {}
    if not text:
        return frequency

    for word in normalize_words(text):
        if len(word) < min_length or word in stop_words:
            continue
        frequency[word] = frequency.get(word, 0) + 1

    return frequency
