"""
Summarization Worker entry point.

Starts the Celery worker for summarization tasks:

    python -m articlesum.worker.main
"""

from __future__ import annotations

from articlesum.celery_config import celery_app, configure_for_worker
from articlesum.config import configure_logging, get_settings

# Import tasks to register them
from articlesum.worker import tasks  # noqa: F401


def worker_argv(settings=None) -> list[str]:
    """Command line passed to ``celery worker``."""
    settings = settings or get_settings()
    return [
        "worker",
        f"--queues={settings.queue.name}",
        f"--concurrency={settings.queue.concurrency}",
        "--prefetch-multiplier=1",
        f"--loglevel={settings.log_level}",
        "--hostname=summarization-worker@%h",
    ]


def main() -> None:
    settings = get_settings()
    configure_for_worker()
    configure_logging(settings)
    celery_app.worker_main(argv=worker_argv(settings))


if __name__ == "__main__":
    main()
