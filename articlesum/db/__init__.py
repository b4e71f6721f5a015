"""
Database module for articlesum.

Provides the SQLAlchemy model, Pydantic schemas and session management.
"""

from articlesum.db.session import (
    get_engine,
    get_sessionmaker,
    init_db,
    session_scope,
)
from articlesum.db.models import Base, Article
from articlesum.db.schemas import ArticleRecord, ArticleSubmission, StatusCounts

__all__ = [
    # Session management
    "get_engine",
    "get_sessionmaker",
    "init_db",
    "session_scope",
    # SQLAlchemy models
    "Base",
    "Article",
    # Pydantic schemas
    "ArticleRecord",
    "ArticleSubmission",
    "StatusCounts",
]
