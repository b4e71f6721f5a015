"""
Article status tracking.

The ``status`` column of an article record is the only durable signal of
a summarization outcome.
"""

from __future__ import annotations

from enum import Enum


class ArticleStatus(str, Enum):
    """Lifecycle of an article record."""

    PENDING = "pending"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if no further pipeline writes are expected for the current job."""
        return self in (ArticleStatus.DONE, ArticleStatus.FAILED)

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]
