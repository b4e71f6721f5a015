"""
Admin API entry point.

    uvicorn articlesum.api.main:app --port 3000
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI

from articlesum import __version__
from articlesum.api.dependencies import Enqueue
from articlesum.api.routes import router as api_router
from articlesum.config import configure_logging, get_settings
from articlesum.storage.article_store import ArticleStore

logger = logging.getLogger(__name__)


def _default_store() -> ArticleStore:
    from articlesum.storage.sql_store import SqlArticleStore

    return SqlArticleStore()


def _default_enqueue() -> Enqueue:
    from articlesum.worker.tasks import enqueue_summarization

    return enqueue_summarization


def create_app(
    store: Optional[ArticleStore] = None,
    enqueue: Optional[Enqueue] = None,
) -> FastAPI:
    """Build the API application.

    Args:
        store: Article store; defaults to the SQL store
        enqueue: Job publisher; defaults to the Celery task
    """

    @asynccontextmanager
    async def lifespan_context(app: FastAPI):
        logger.info(
            "Admin API started",
            extra={"store": app.state.article_store.provider_name},
        )
        yield

    app = FastAPI(title="articlesum", version=__version__, lifespan=lifespan_context)
    app.state.article_store = store or _default_store()
    app.state.enqueue = enqueue or _default_enqueue()
    app.include_router(api_router)
    return app


settings = get_settings()
configure_logging(settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.api_port)
