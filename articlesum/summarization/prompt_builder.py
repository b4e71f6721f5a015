"""Prompt building for summary generation."""
from __future__ import annotations

import logging
from enum import Enum
from textwrap import dedent
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class SummaryMode(str, Enum):
    """Requested summary length."""

    SHORT = "short"
    LONG = "long"

    @property
    def label(self) -> str:
        return "short" if self is SummaryMode.SHORT else "extended"

    @property
    def sentence_range(self) -> str:
        return "2–3 sentences" if self is SummaryMode.SHORT else "5–7 sentences"


DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES: Dict[str, str] = {
    "uk": "Ukrainian",
    "en": "English",
    "ru": "Russian",
    "pl": "Polish",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
}


class PromptBuilder:
    """Builds summarization prompts for the generative provider.

    The reduced text is embedded verbatim; the extractive step already bounds
    its size.
    """

    def __init__(self, language_names: Optional[Mapping[str, str]] = None):
        """Initialize prompt builder.

        Args:
            language_names: Two-letter code to language name map. If None,
                uses the built-in map.
        """
        self._language_names = dict(language_names or LANGUAGE_NAMES)

    def language_name(self, language: Optional[str]) -> str:
        """Resolve a language code; unknown codes pass through verbatim.

        A missing code resolves as English.
        """
        language = language or DEFAULT_LANGUAGE
        return self._language_names.get(language.lower(), language)

    def build(self, reduced_text: str, language: str, mode: SummaryMode | str) -> str:
        """Build the prompt for one summary.

        Args:
            reduced_text: Output of the extractive reducer
            language: Two-letter language code
            mode: Summary length mode

        Returns:
            Instruction string for the provider
        """
        mode = SummaryMode(mode)
        language_name = self.language_name(language)
        logger.debug(
            "Building prompt",
            extra={"language": language_name, "mode": mode.value, "text_length": len(reduced_text)},
        )

        template = dedent(
            """
            Summarize the following news article in {language}.
            Provide a {label} summary ({sentences}).

            Text: {text}
            """
        ).strip()
        return template.format(
            language=language_name,
            label=mode.label,
            sentences=mode.sentence_range,
            text=reduced_text,
        )

    def build_pair(self, reduced_text: str, language: str) -> tuple[str, str]:
        """Build the (short, long) prompt pair."""
        return (
            self.build(reduced_text, language, SummaryMode.SHORT),
            self.build(reduced_text, language, SummaryMode.LONG),
        )
