"""Tests for the ArticleStore helpers."""

import pytest

from articlesum.status import ArticleStatus
from articlesum.storage.article_store import ArticleStore, OUTPUT_FIELDS, cleared_outputs


def test_cleared_outputs_covers_all_outputs():
    assert cleared_outputs() == {"summary_short": None, "summary_long": None, "keywords": None}
    assert set(cleared_outputs()) == set(OUTPUT_FIELDS)


def test_validate_fields_converts_enum():
    values = ArticleStore.validate_fields({"status": ArticleStatus.DONE, "attempt": 2})
    assert values == {"status": "done", "attempt": 2}


def test_validate_fields_rejects_unknown():
    with pytest.raises(ValueError):
        ArticleStore.validate_fields({"article_id": "a1"})
    with pytest.raises(ValueError):
        ArticleStore.validate_fields({"updated_at": None})


def test_status_helpers():
    assert ArticleStatus.DONE.is_terminal()
    assert ArticleStatus.FAILED.is_terminal()
    assert not ArticleStatus.PROCESSING.is_terminal()
    assert ArticleStatus.values() == ["pending", "processing", "done", "failed"]
