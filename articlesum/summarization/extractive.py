"""Extractive pre-reduction of article text.

Shrinks an article to its most salient sentences before the (expensive)
generative call. Salience is the mean global word frequency of a sentence's
words, so long sentences are not favoured over short ones.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .text import (
    GENERAL_MIN_WORD_LENGTH,
    GENERAL_STOP_WORDS,
    count_word_frequency,
    normalize_words,
    split_sentences,
)

logger = logging.getLogger(__name__)


@dataclass
class ScoredSentence:
    """A sentence with its salience score and position in the document."""

    sentence: str
    score: float
    index: int


class ExtractiveReducer:
    """Selects between ``min_sentences`` and ``max_sentences`` salient sentences."""

    def __init__(self, min_sentences: int = 3, max_sentences: int = 5):
        if min_sentences < 1 or max_sentences < min_sentences:
            raise ValueError("Require 1 <= min_sentences <= max_sentences")
        self.min_sentences = min_sentences
        self.max_sentences = max_sentences

    def reduce(self, text: str) -> str:
        """Reduce text to its most important sentences.

        Args:
            text: Article text

        Returns:
            Selected sentences in document order joined by single spaces;
            empty string for blank input
        """
        sentences = split_sentences(text)
        if not sentences:
            return ""

        if len(sentences) <= self.max_sentences:
            return " ".join(sentences)

        frequency = count_word_frequency(
            text, GENERAL_STOP_WORDS, GENERAL_MIN_WORD_LENGTH
        )
        scored = self.score_sentences(sentences, frequency)

        # Stable sort: equal scores keep document order
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        selected = self.select_top(ranked)
        selected.sort(key=lambda item: item.index)

        logger.debug(
            "Reduced article",
            extra={
                "sentence_count": len(sentences),
                "selected_count": len(selected),
                "selected_indices": [item.index for item in selected],
            },
        )
        return " ".join(item.sentence for item in selected)

    def score_sentences(
        self, sentences: Sequence[str], frequency: Dict[str, int]
    ) -> List[ScoredSentence]:
        return [
            ScoredSentence(sentence=sentence, score=sentence_score(sentence, frequency), index=index)
            for index, sentence in enumerate(sentences)
        ]

    def select_top(self, ranked: Sequence[ScoredSentence]) -> List[ScoredSentence]:
        """Pick the top ranked sentences, falling back to ``min_sentences``.

        When fewer than ``min_sentences`` of the top ``max_sentences`` carry a
        nonzero score, only the top ``min_sentences`` are kept.
        """
        if len(ranked) <= self.max_sentences:
            return list(ranked)

        top = list(ranked[: self.max_sentences])
        nonzero = sum(1 for item in top if item.score > 0)
        if nonzero >= self.min_sentences:
            return top

        return list(ranked[: max(self.min_sentences, nonzero)])


def sentence_score(sentence: str, frequency: Dict[str, int]) -> float:
    """Mean frequency of the sentence's words longer than two characters."""
    words = [w for w in normalize_words(sentence) if len(w) >= GENERAL_MIN_WORD_LENGTH]
    if not words:
        return 0.0

    return sum(frequency.get(word, 0) for word in words) / len(words)


_default_reducer = ExtractiveReducer()


def reduce_text(text: str) -> str:
    """Reduce text with the default 3-5 sentence reducer."""
    return _default_reducer.reduce(text)
