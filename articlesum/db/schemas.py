"""
Pydantic schemas for store responses.

These decouple callers (pipeline, admin API) from the ORM model.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from articlesum.status import ArticleStatus


class ArticleRecord(BaseModel):
    """Snapshot of an article record as written by the store."""

    article_id: str
    content: str = ""
    language: Optional[str] = None
    summary_short: Optional[str] = None
    summary_long: Optional[str] = None
    keywords: Optional[List[str]] = None
    status: ArticleStatus = ArticleStatus.PENDING
    run_id: Optional[str] = None
    attempt: int = 0
    error: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def has_outputs(self) -> bool:
        return any(
            value is not None
            for value in (self.summary_short, self.summary_long, self.keywords)
        )


class StatusCounts(BaseModel):
    """Article counts grouped by status."""

    total: int = 0
    done: int = 0
    processing: int = 0
    failed: int = 0
    pending: int = 0

    @classmethod
    def from_mapping(cls, counts: dict[str, int]) -> "StatusCounts":
        known = {status.value: counts.get(status.value, 0) for status in ArticleStatus}
        return cls(total=sum(counts.values()), **known)


class ArticleSubmission(BaseModel):
    """Job payload accepted by the admin API."""

    article_id: str = Field(min_length=1)
    content: str
    language: str = Field(default="en", min_length=1, max_length=16)
