from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from articlesum.api.dependencies import get_store
from articlesum.db.schemas import StatusCounts
from articlesum.errors import StoreError
from articlesum.storage.article_store import ArticleStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/stats", response_model=StatusCounts)
def stats(store: ArticleStore = Depends(get_store)):
    """Article counts by status."""
    try:
        counts = store.count_by_status()
    except StoreError as e:
        logger.error("Failed to fetch stats", extra={"error": str(e)})
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch stats", "message": str(e)},
        )
    return StatusCounts.from_mapping(counts)
