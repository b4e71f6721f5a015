"""
Database session management for articlesum.

Provides SQLAlchemy engine and session factory configuration
with support for connection pooling and environment-based configuration.
"""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from articlesum.config import get_settings
from articlesum.db.models import Base


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Create a singleton SQLAlchemy Engine.

    Returns:
        SQLAlchemy Engine instance
    """
    settings = get_settings()
    url = settings.database_url

    if url.startswith("sqlite"):
        return create_engine(url, future=True)

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        future=True,
    )


def get_sessionmaker(engine: Optional[Engine] = None) -> sessionmaker[Session]:
    """Get a session factory bound to the engine.

    Args:
        engine: Engine to bind; defaults to the configured singleton

    Returns:
        SQLAlchemy sessionmaker instance
    """
    return sessionmaker(
        bind=engine or get_engine(),
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Open a session from ``factory`` with automatic commit/rollback."""
    session: Session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Optional[Engine] = None) -> None:
    """Initialize database tables.

    Creates all tables defined in the Base metadata.
    Should only be used for development/testing.
    Production should use Alembic migrations.
    """
    Base.metadata.create_all(bind=engine or get_engine())
