from __future__ import annotations

import os

# Settings are read at import time by the Celery app; keep tests off Redis/Postgres
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")
os.environ.setdefault("DATABASE__URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from articlesum.db.session import get_sessionmaker, init_db
from articlesum.storage.sql_store import SqlArticleStore
from articlesum.worker.pipeline import SummarizationJob, SummarizationPipeline


SIX_SENTENCE_ARTICLE = (
    "The city council approved a new transit budget on Monday. "
    "The transit budget expands bus service across the northern districts. "
    "Council members debated the budget for several hours. "
    "Residents in the northern districts have waited years for better bus service. "
    "The mayor praised the council for approving the transit plan. "
    "Construction on new bus lanes begins next spring."
)


@pytest.fixture
def article_text() -> str:
    """Six sentences: long enough to go through scoring."""
    return SIX_SENTENCE_ARTICLE


@pytest.fixture
def in_memory_store():
    """
    Provide InMemoryArticleStore for tests.

    Example:
        def test_write(in_memory_store):
            in_memory_store.upsert_status("a1", {"status": "pending"})
            assert in_memory_store.get("a1").status == "pending"
    """
    from fakes.store import InMemoryArticleStore
    return InMemoryArticleStore()


@pytest.fixture
def stub_provider():
    """Provide StubSummaryProvider returning fixed summaries."""
    from fakes.providers import StubSummaryProvider
    return StubSummaryProvider()


@pytest.fixture
def pipeline(in_memory_store, stub_provider) -> SummarizationPipeline:
    return SummarizationPipeline(store=in_memory_store, provider=stub_provider)


@pytest.fixture
def make_job(article_text):
    def _make(article_id: str = "a1", content: str | None = None, language: str = "en"):
        return SummarizationJob(
            article_id=article_id,
            content=article_text if content is None else content,
            language=language,
        )
    return _make


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite shared across connections, schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_store(sqlite_engine) -> SqlArticleStore:
    return SqlArticleStore(session_factory=get_sessionmaker(sqlite_engine))


@pytest.fixture
def installed_pipeline(pipeline) -> Generator[SummarizationPipeline, None, None]:
    """Install ``pipeline`` as the worker's pipeline for Celery task tests."""
    from articlesum.worker import tasks

    tasks.set_pipeline(pipeline)
    try:
        yield pipeline
    finally:
        tasks.set_pipeline(None)
