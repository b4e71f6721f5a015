"""
Celery configuration for articlesum.

This module provides the Celery application used by the summarization worker
and by the processes that enqueue jobs (admin API, enqueue script).
"""

from __future__ import annotations

from celery import Celery
from kombu import Exchange, Queue

from articlesum.config import get_settings

TASK_SUMMARIZE_ARTICLE = "articlesum.summarize_article"

_settings = get_settings()

# Create Celery application
celery_app = Celery(
    "articlesum",
    broker=_settings.effective_celery_broker_url,
    backend=_settings.effective_celery_result_backend,
)

# Define exchanges
summarization_exchange = Exchange("summarization", type="direct")

celery_app.conf.task_queues = (
    Queue(
        _settings.queue.name,
        summarization_exchange,
        routing_key="summarization",
    ),
)

# Task routing configuration
celery_app.conf.task_routes = {
    TASK_SUMMARIZE_ARTICLE: {
        "queue": _settings.queue.name,
        "routing_key": "summarization",
    },
}

# Celery configuration
celery_app.conf.update(
    # Task execution settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_default_queue=_settings.queue.name,

    # Task result settings
    result_expires=86400,  # 24 hours
    result_extended=True,

    # Task acknowledgment settings
    task_acks_late=True,  # Acknowledge after task completes
    task_reject_on_worker_lost=True,  # Redeliver if worker dies

    # Worker settings
    worker_prefetch_multiplier=1,  # One job per process at a time
    worker_concurrency=_settings.queue.concurrency,

    # Retry settings
    task_default_retry_delay=_settings.queue.retry_delay,
    task_max_retries=_settings.queue.max_attempts - 1,

    # Monitoring
    task_track_started=True,
    task_send_sent_event=True,
    worker_send_task_events=True,
)


def configure_for_worker() -> None:
    """Apply time limits for the summarization worker."""
    celery_app.conf.update(
        task_time_limit=300,  # 5 minutes
        task_soft_time_limit=270,  # 4.5 minutes
    )
