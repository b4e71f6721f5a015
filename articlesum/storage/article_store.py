"""
Article Record Store abstraction.

The pipeline only ever writes through ``upsert_status``: insert the record if
missing, otherwise overwrite the named fields, in one atomic statement.
Implementations: SqlArticleStore (PostgreSQL/SQLite via SQLAlchemy).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from articlesum.db.schemas import ArticleRecord

# Columns a caller may write; article_id is the key and timestamps are managed
WRITABLE_FIELDS = frozenset(
    {
        "content",
        "language",
        "summary_short",
        "summary_long",
        "keywords",
        "status",
        "run_id",
        "attempt",
        "error",
    }
)

OUTPUT_FIELDS = ("summary_short", "summary_long", "keywords")


def cleared_outputs() -> Dict[str, Any]:
    """Field values that wipe any previous run's summaries and keywords."""
    return {name: None for name in OUTPUT_FIELDS}


class ArticleStore(ABC):
    """Abstract base class for article record storage."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Store identifier (e.g., 'sql', 'memory')."""
        pass

    @abstractmethod
    def upsert_status(
        self,
        article_id: str,
        fields: Mapping[str, Any],
        *,
        insert_if_missing: bool = True,
        expected_run_id: Optional[str] = None,
    ) -> Optional[ArticleRecord]:
        """Atomically write ``fields`` for ``article_id``.

        Args:
            article_id: External article identifier (the upsert key)
            fields: Column values to write; ``updated_at`` is always refreshed
            insert_if_missing: Insert a new record when none exists
            expected_run_id: Only overwrite an existing record whose ``run_id``
                matches (compare-and-set); ``None`` disables the guard

        Returns:
            The record as written, or None if nothing was written (record
            missing with ``insert_if_missing=False``, or guard mismatch)

        Raises:
            StoreError: The underlying storage failed
        """
        pass

    @abstractmethod
    def get(self, article_id: str) -> Optional[ArticleRecord]:
        """Read a record by article identifier."""
        pass

    @abstractmethod
    def count_by_status(self) -> Dict[str, int]:
        """Count records grouped by status value."""
        pass

    @staticmethod
    def validate_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Check field names and normalize enum values for storage."""
        unknown = set(fields) - WRITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown article fields: {sorted(unknown)}")

        values = dict(fields)
        status = values.get("status")
        if status is not None and hasattr(status, "value"):
            values["status"] = status.value
        return values
