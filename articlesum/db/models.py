"""
SQLAlchemy ORM models for articlesum.

A single ``articles`` table holds the per-article summarization state.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    JSON,
    String,
    Text,
    text as sa_text,
)
from sqlalchemy.orm import declarative_base

from articlesum.status import ArticleStatus

Base = declarative_base()


class Article(Base):
    """Article record - original content plus derived summaries and status."""

    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # External identifier supplied with the job; the upsert key
    article_id = Column(String, nullable=False)
    content = Column(Text, nullable=False, server_default=sa_text("''"))
    language = Column(String(16), nullable=True)

    # Outputs; only populated while status == done
    summary_short = Column(Text, nullable=True)
    summary_long = Column(Text, nullable=True)
    keywords = Column(JSON(none_as_null=True), nullable=True)

    status = Column(
        String,
        nullable=False,
        default=ArticleStatus.PENDING.value,
        server_default=sa_text(f"'{ArticleStatus.PENDING.value}'"),
    )
    # Token of the attempt that currently owns the record
    run_id = Column(String(36), nullable=True)
    attempt = Column(Integer, nullable=False, default=0, server_default=sa_text("0"))
    error = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=sa_text("CURRENT_TIMESTAMP"))
    updated_at = Column(DateTime, nullable=False, server_default=sa_text("CURRENT_TIMESTAMP"))

    __table_args__ = (
        Index("idx_articles_article_id", "article_id", unique=True),
        Index("idx_articles_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Article article_id={self.article_id!r} status={self.status!r}>"
