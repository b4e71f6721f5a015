"""
Summarization module for articlesum.

Provides sentence splitting, word-frequency scoring, extractive reduction,
keyword extraction, prompt building and the generative provider abstraction.
"""

from .text import (
    GENERAL_STOP_WORDS,
    KEYWORD_STOP_WORDS,
    count_word_frequency,
    split_sentences,
)
from .extractive import ExtractiveReducer, ScoredSentence, reduce_text, sentence_score
from .keywords import extract_keywords
from .prompt_builder import LANGUAGE_NAMES, PromptBuilder, SummaryMode
from .providers import (
    HuggingFaceProvider,
    OpenAIProvider,
    SummaryProvider,
    create_summary_provider,
)

__all__ = [
    "GENERAL_STOP_WORDS",
    "KEYWORD_STOP_WORDS",
    "count_word_frequency",
    "split_sentences",
    "ExtractiveReducer",
    "ScoredSentence",
    "reduce_text",
    "sentence_score",
    "extract_keywords",
    "LANGUAGE_NAMES",
    "PromptBuilder",
    "SummaryMode",
    "HuggingFaceProvider",
    "OpenAIProvider",
    "SummaryProvider",
    "create_summary_provider",
]
