"""
Publish a summarization job from a text file.

Usage:
  python -m articlesum.scripts.enqueue_job --article-id news-42 --language uk article.txt
  echo "Some text." | python -m articlesum.scripts.enqueue_job --article-id news-43 -
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from articlesum.config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enqueue an article for summarization")
    parser.add_argument("--article-id", required=True, help="External article identifier")
    parser.add_argument("--language", default="en", help="Language code (default: en)")
    parser.add_argument("file", help="Path to a UTF-8 text file, or '-' for stdin")
    return parser


def read_content(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def main(
    argv: Optional[Sequence[str]] = None,
    enqueue: Optional[Callable[[str, str, str], str]] = None,
) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        content = read_content(args.file)
    except OSError as e:
        print(f"[enqueue] Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    if not content.strip():
        print("[enqueue] Article content is empty", file=sys.stderr)
        return 1

    if enqueue is None:
        from articlesum.worker.tasks import enqueue_summarization as enqueue

    task_id = enqueue(args.article_id, content, args.language)
    print(f"[enqueue] Job added: article_id={args.article_id} task_id={task_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
