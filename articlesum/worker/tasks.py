"""
Summarization Worker Celery Tasks.

Binds the summarization pipeline to Celery: the attempt counter, the fixed
retry delay, the start rate limit and the final give-up write all come from
the task configuration below.
"""

from __future__ import annotations

import logging
from typing import Optional

from celery import Task

from articlesum.celery_config import TASK_SUMMARIZE_ARTICLE, celery_app
from articlesum.config import get_settings
from articlesum.errors import ContentValidationError
from articlesum.storage.sql_store import SqlArticleStore
from articlesum.summarization.providers import create_summary_provider
from articlesum.worker.pipeline import SummarizationJob, SummarizationPipeline

logger = logging.getLogger(__name__)

_settings = get_settings()
_pipeline: Optional[SummarizationPipeline] = None


def get_pipeline() -> SummarizationPipeline:
    """Get the process-wide pipeline, building it from settings on first use."""
    global _pipeline
    if _pipeline is None:
        settings = get_settings()
        _pipeline = SummarizationPipeline(
            store=SqlArticleStore(),
            provider=create_summary_provider(settings.summarization),
            max_attempts=settings.queue.max_attempts,
        )
    return _pipeline


def set_pipeline(pipeline: Optional[SummarizationPipeline]) -> None:
    """Replace the process-wide pipeline (None rebuilds it from settings)."""
    global _pipeline
    _pipeline = pipeline


def _article_id_from(args, kwargs) -> Optional[str]:
    if kwargs and kwargs.get("article_id"):
        return kwargs["article_id"]
    if args:
        return args[0]
    return None


class SummarizationTask(Task):
    """Base class for summarization tasks."""

    autoretry_for = (Exception,)
    dont_autoretry_for = (ContentValidationError,)
    retry_backoff = False
    max_retries = _settings.queue.max_attempts - 1
    default_retry_delay = _settings.queue.retry_delay
    rate_limit = _settings.queue.rate_limit
    acks_late = True

    def on_retry(self, exc, task_id, args, kwargs, einfo):
        """Log the failed attempt before Celery re-publishes the job."""
        attempt = self.request.retries + 1
        logger.warning(
            f"Summarization attempt {attempt}/{self.max_retries + 1} failed, retrying: {exc}",
            extra={
                "task_id": task_id,
                "article_id": _article_id_from(args, kwargs),
                "attempt": attempt,
                "max_attempts": self.max_retries + 1,
                "retry_delay": self.default_retry_delay,
            },
        )

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Handle task failure: attempts exhausted or error not retryable."""
        article_id = _article_id_from(args, kwargs)
        logger.error(
            f"Summarization task failed: {exc}",
            exc_info=True,
            extra={"task_id": task_id, "article_id": article_id},
        )
        if article_id:
            get_pipeline().give_up(article_id, error=str(exc) or None)


@celery_app.task(base=SummarizationTask, bind=True, name=TASK_SUMMARIZE_ARTICLE)
def summarize_article(
    self,
    article_id: str,
    content: str,
    language: str = "en",
) -> dict:
    """
    Summarize an article.

    Args:
        article_id: External article identifier
        content: Full article text
        language: Language code for the generated summaries

    Returns:
        Result dictionary with the final status
    """
    attempt = self.request.retries + 1
    logger.info(
        "Starting summarization",
        extra={
            "task_id": self.request.id,
            "article_id": article_id,
            "attempt": attempt,
        },
    )

    job = SummarizationJob.from_payload(
        {"article_id": article_id, "content": content, "language": language}
    )
    record = get_pipeline().process(job, attempt=attempt)

    if record is None:
        return {"success": False, "article_id": article_id, "reason": "superseded"}

    return {
        "success": True,
        "article_id": article_id,
        "status": record.status.value,
        "attempt": attempt,
    }


def enqueue_summarization(article_id: str, content: str, language: str = "en") -> str:
    """
    Publish a summarization job.

    Returns:
        Celery task ID
    """
    result = summarize_article.apply_async(
        kwargs={"article_id": article_id, "content": content, "language": language},
    )
    logger.info(
        "Summarization job enqueued",
        extra={"article_id": article_id, "task_id": result.id},
    )
    return result.id
