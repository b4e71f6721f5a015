"""Error taxonomy for the summarization pipeline."""

from __future__ import annotations


class SummarizationError(Exception):
    """Base class for pipeline errors."""


class ContentValidationError(SummarizationError):
    """Input is empty or degenerate; retrying cannot help."""


class ProviderError(SummarizationError):
    """The generative provider failed or returned no content."""

    def __init__(self, message: str, *, provider: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class StoreError(SummarizationError):
    """The article record store rejected or failed a write."""
