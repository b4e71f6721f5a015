from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from articlesum.api.dependencies import Enqueue, get_enqueue, get_store
from articlesum.db.schemas import ArticleRecord, ArticleSubmission
from articlesum.errors import StoreError
from articlesum.status import ArticleStatus
from articlesum.storage.article_store import ArticleStore, cleared_outputs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles")


class SubmissionResponse(BaseModel):
    article_id: str
    task_id: str
    status: ArticleStatus


@router.get("/{article_id}", response_model=ArticleRecord)
def get_article(article_id: str, store: ArticleStore = Depends(get_store)):
    try:
        record = store.get(article_id)
    except StoreError as e:
        logger.error("Failed to read article", extra={"article_id": article_id, "error": str(e)})
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch article", "message": str(e)},
        )
    if record is None:
        raise HTTPException(status_code=404, detail=f"Article {article_id} not found")
    return record


def _mark_unpublished(store: ArticleStore, article_id: str, error: str) -> None:
    """Move a pending record with no job behind it to failed."""
    try:
        store.upsert_status(
            article_id,
            {"status": ArticleStatus.FAILED, "error": error},
            insert_if_missing=False,
        )
    except StoreError as e:
        logger.error(
            "Failed to update article status to failed",
            extra={"article_id": article_id, "error": str(e)},
        )


@router.post("", status_code=202, response_model=SubmissionResponse)
def submit_article(
    payload: ArticleSubmission,
    store: ArticleStore = Depends(get_store),
    enqueue: Enqueue = Depends(get_enqueue),
):
    """Record the article as pending and publish a summarization job."""
    try:
        store.upsert_status(
            payload.article_id,
            {
                "status": ArticleStatus.PENDING,
                "content": payload.content,
                "language": payload.language,
                "run_id": None,
                "attempt": 0,
                "error": None,
                **cleared_outputs(),
            },
            insert_if_missing=True,
        )
    except StoreError as e:
        logger.error(
            "Failed to record article",
            extra={"article_id": payload.article_id, "error": str(e)},
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to enqueue article", "message": str(e)},
        )

    try:
        task_id = enqueue(payload.article_id, payload.content, payload.language)
    except Exception as e:
        logger.error(
            "Failed to publish summarization job",
            exc_info=True,
            extra={"article_id": payload.article_id, "error": str(e)},
        )
        _mark_unpublished(store, payload.article_id, str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to enqueue article", "message": str(e)},
        )

    logger.info(
        "Article submitted",
        extra={"article_id": payload.article_id, "task_id": task_id},
    )
    return SubmissionResponse(
        article_id=payload.article_id,
        task_id=task_id,
        status=ArticleStatus.PENDING,
    )
