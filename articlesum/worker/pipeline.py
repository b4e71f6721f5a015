"""
Article summarization pipeline.

One call to ``SummarizationPipeline.process`` is one attempt at a job:

1. claim the record (``processing``, fresh ``run_id``, outputs cleared)
2. reduce the content to its most important sentences
3. build the short and long prompts
4. call the provider for both summaries, in sequence
5. extract keywords from the original content
6. write the ``done`` record
7. on any failure, write ``failed`` best-effort and re-raise

Writes after the claim only land while the record still carries this
attempt's ``run_id``. Retry scheduling belongs to the transport
(see ``articlesum.worker.tasks``).
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from articlesum.db.schemas import ArticleRecord
from articlesum.errors import ContentValidationError, StoreError
from articlesum.status import ArticleStatus
from articlesum.storage.article_store import ArticleStore, cleared_outputs
from articlesum.summarization.extractive import ExtractiveReducer
from articlesum.summarization.keywords import DEFAULT_KEYWORD_COUNT, extract_keywords
from articlesum.summarization.prompt_builder import PromptBuilder
from articlesum.summarization.providers import SummaryProvider

GIVE_UP_MESSAGE = "Summarization failed after all retry attempts"


@dataclass(frozen=True)
class SummarizationJob:
    """Work item: one article to summarize."""

    article_id: str
    content: str
    language: str = "en"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SummarizationJob":
        """Build a job from task kwargs or a JSON body."""
        article_id = payload.get("article_id")
        if not article_id or not isinstance(article_id, str):
            raise ContentValidationError("Job payload is missing article_id")

        content = payload.get("content")
        if content is None:
            content = ""
        if not isinstance(content, str):
            raise ContentValidationError(f"Job content for {article_id} must be text")

        return cls(
            article_id=article_id,
            content=content,
            language=payload.get("language") or "en",
        )


class SummarizationPipeline:
    """Runs summarization attempts against an article store and a provider."""

    def __init__(
        self,
        store: ArticleStore,
        provider: SummaryProvider,
        reducer: Optional[ExtractiveReducer] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        keyword_count: int = DEFAULT_KEYWORD_COUNT,
        max_attempts: int = 3,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.provider = provider
        self.reducer = reducer or ExtractiveReducer()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.keyword_count = keyword_count
        self.max_attempts = max_attempts
        self.logger = logger or logging.getLogger(__name__)

    def process(self, job: SummarizationJob, attempt: int = 1) -> Optional[ArticleRecord]:
        """Run one attempt of ``job``.

        Args:
            job: Article to summarize
            attempt: 1-based attempt number supplied by the transport

        Returns:
            The ``done`` record, or None when a newer attempt owns the record

        Raises:
            ContentValidationError: Content reduced to nothing or empty prompt
            ProviderError: Provider call failed
            StoreError: A store write failed
        """
        run_id = str(uuid.uuid4())
        claimed = False
        context = {
            "article_id": job.article_id,
            "attempt": attempt,
            "max_attempts": self.max_attempts,
            "run_id": run_id,
        }

        try:
            self.store.upsert_status(
                job.article_id,
                {
                    "status": ArticleStatus.PROCESSING,
                    "content": job.content,
                    "language": job.language,
                    "run_id": run_id,
                    "attempt": attempt,
                    "error": None,
                    **cleared_outputs(),
                },
                insert_if_missing=True,
            )
            claimed = True
            self.logger.info("Processing article", extra=context)

            reduced = self.reducer.reduce(job.content)
            if not reduced.strip():
                raise ContentValidationError(
                    "Failed to extract important sentences from content"
                )

            short_prompt, long_prompt = self.prompt_builder.build_pair(reduced, job.language)
            summary_short = self.provider.summarize(short_prompt)
            summary_long = self.provider.summarize(long_prompt)

            keywords = extract_keywords(job.content, self.keyword_count)

            record = self.store.upsert_status(
                job.article_id,
                {
                    "status": ArticleStatus.DONE,
                    "content": job.content,
                    "language": job.language,
                    "summary_short": summary_short,
                    "summary_long": summary_long,
                    "keywords": keywords,
                    "attempt": attempt,
                    "error": None,
                },
                insert_if_missing=True,
                expected_run_id=run_id,
            )
        except Exception as exc:
            self.logger.error(
                f"Attempt {attempt}/{self.max_attempts} failed: {exc}",
                extra={**context, "error_type": type(exc).__name__},
            )
            self._record_failure(job, attempt, run_id, claimed, exc)
            raise

        if record is None:
            self.logger.warning("stale write skipped", extra={**context, "status": "done"})
            return None

        self.logger.info(
            "Article summarized",
            extra={**context, "keywords": len(keywords)},
        )
        return record

    def _record_failure(
        self,
        job: SummarizationJob,
        attempt: int,
        run_id: str,
        claimed: bool,
        exc: BaseException,
    ) -> None:
        """Best-effort ``failed`` write for this attempt; never raises."""
        fields = {
            "status": ArticleStatus.FAILED,
            "content": job.content,
            "language": job.language,
            "attempt": attempt,
            "error": str(exc) or type(exc).__name__,
            **cleared_outputs(),
        }
        if not claimed:
            fields["run_id"] = run_id

        try:
            record = self.store.upsert_status(
                job.article_id,
                fields,
                insert_if_missing=True,
                expected_run_id=run_id if claimed else None,
            )
        except Exception as write_error:
            self.logger.error(
                "Failed to update article status to failed",
                extra={
                    "article_id": job.article_id,
                    "attempt": attempt,
                    "error": str(write_error),
                },
            )
            return

        if record is None:
            self.logger.warning(
                "stale write skipped",
                extra={"article_id": job.article_id, "attempt": attempt, "status": "failed"},
            )

    def give_up(self, article_id: str, error: Optional[str] = None) -> Optional[ArticleRecord]:
        """Mark an article permanently failed once the transport stops retrying.

        Keyed only by ``article_id``: never inserts and ignores ``run_id``.
        """
        self.logger.error(
            "Article failed after all retry attempts",
            extra={"article_id": article_id, "max_attempts": self.max_attempts},
        )
        try:
            return self.store.upsert_status(
                article_id,
                {
                    "status": ArticleStatus.FAILED,
                    "error": error or GIVE_UP_MESSAGE,
                    **cleared_outputs(),
                },
                insert_if_missing=False,
            )
        except StoreError as e:
            self.logger.error(
                "Failed to update article status to failed",
                extra={"article_id": article_id, "error": str(e)},
            )
            return None
