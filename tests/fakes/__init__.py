"""
Fake implementations for testing.

This package contains fake (test double) implementations of core interfaces,
following the "fakes over mocks" philosophy. Fakes are simplified working
implementations that behave like real components but avoid external dependencies.

Key fakes:
- InMemoryArticleStore: Article store with the same upsert/guard semantics
  as the SQL store, plus a write history and configurable failures
- StubSummaryProvider: Provider returning fixed summaries, with scripted failures
"""

from .providers import StubSummaryProvider
from .store import InMemoryArticleStore, StoreWrite

__all__ = [
    "InMemoryArticleStore",
    "StoreWrite",
    "StubSummaryProvider",
]
