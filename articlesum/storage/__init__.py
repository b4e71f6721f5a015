"""Article record storage."""

from .article_store import ArticleStore, OUTPUT_FIELDS, WRITABLE_FIELDS, cleared_outputs
from .sql_store import SqlArticleStore

__all__ = [
    "ArticleStore",
    "OUTPUT_FIELDS",
    "WRITABLE_FIELDS",
    "cleared_outputs",
    "SqlArticleStore",
]
