"""Tests for the fakes themselves: they must behave like the real components."""

from datetime import datetime, timedelta, timezone

import pytest

from articlesum.errors import ProviderError, StoreError
from articlesum.status import ArticleStatus
from fakes import InMemoryArticleStore, StubSummaryProvider
from fakes.providers import LONG_SUMMARY, SHORT_SUMMARY


class TestInMemoryArticleStore:
    """Test InMemoryArticleStore semantics."""

    def test_insert_and_overwrite(self):
        store = InMemoryArticleStore()
        store.upsert_status("a1", {"status": "processing", "content": "x", "run_id": "r1"})
        record = store.upsert_status("a1", {"status": ArticleStatus.DONE})

        assert record.status == ArticleStatus.DONE
        assert record.content == "x"
        assert store.status_history("a1") == ["processing", "done"]

    def test_guard_and_no_insert(self):
        store = InMemoryArticleStore()
        assert store.upsert_status("a1", {"status": "failed"}, insert_if_missing=False) is None

        store.upsert_status("a1", {"status": "processing", "run_id": "r1"})
        assert store.upsert_status("a1", {"status": "done"}, expected_run_id="r0") is None
        assert store.get("a1").status == ArticleStatus.PROCESSING
        assert [w.written for w in store.writes] == [False, True, False]

    def test_timestamps_are_naive_utc(self):
        store = InMemoryArticleStore()
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        created = store.upsert_status("a1", {"status": "pending"})
        updated = store.upsert_status("a1", {"status": "processing"})

        assert created.created_at.tzinfo is None
        assert abs(created.created_at - before) < timedelta(minutes=1)
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    def test_configured_failures(self):
        store = InMemoryArticleStore(fail_on_writes=[2], fail_on_statuses=["failed"])
        store.upsert_status("a1", {"status": "processing"})
        with pytest.raises(StoreError):
            store.upsert_status("a1", {"status": "processing"})
        with pytest.raises(StoreError):
            store.upsert_status("a1", {"status": "failed"})
        assert len(store.writes) == 3

    def test_read_failures(self):
        store = InMemoryArticleStore(fail_reads=True)
        with pytest.raises(StoreError):
            store.get("a1")
        with pytest.raises(StoreError):
            store.count_by_status()

    def test_returns_copies(self):
        store = InMemoryArticleStore()
        record = store.upsert_status("a1", {"status": "processing", "keywords": None})
        record.content = "mutated"
        assert store.get("a1").content == ""


class TestStubSummaryProvider:
    """Test StubSummaryProvider behaviour."""

    def test_short_and_long(self):
        provider = StubSummaryProvider()
        assert provider.summarize("Provide a short summary (2–3 sentences).") == SHORT_SUMMARY
        assert provider.summarize("Provide a extended summary (5–7 sentences).") == LONG_SUMMARY
        assert provider.call_count == 2

    def test_scripted_failures(self):
        provider = StubSummaryProvider(fail_on_calls=[2])
        provider.summarize("a short summary")
        with pytest.raises(ProviderError):
            provider.summarize("a short summary")
        assert provider.summarize("a short summary") == SHORT_SUMMARY

    def test_empty_prompt_not_counted(self):
        provider = StubSummaryProvider()
        with pytest.raises(ProviderError):
            provider.summarize("")
        assert provider.call_count == 0
