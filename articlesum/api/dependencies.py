from __future__ import annotations

from typing import Callable

from fastapi import Request

from articlesum.storage.article_store import ArticleStore

Enqueue = Callable[[str, str, str], str]


def get_store(request: Request) -> ArticleStore:
    return request.app.state.article_store


def get_enqueue(request: Request) -> Enqueue:
    return request.app.state.enqueue
