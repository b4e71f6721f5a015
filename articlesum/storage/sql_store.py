"""
SQL Article Store Implementation

Provides storage using SQLAlchemy Core statements against the ``articles``
table. Upserts are native ``INSERT ... ON CONFLICT DO UPDATE ... RETURNING``
statements, so there is no read-then-write window.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from articlesum.db.models import Article
from articlesum.db.schemas import ArticleRecord
from articlesum.db.session import get_sessionmaker, session_scope
from articlesum.errors import StoreError
from .article_store import ArticleStore

logger = logging.getLogger(__name__)

_articles = Article.__table__

_INSERT_BY_DIALECT: Dict[str, Callable[..., Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlArticleStore(ArticleStore):
    """
    SQL storage implementation using SQLAlchemy.

    Uses the configured engine unless a session factory is injected.
    """

    def __init__(self, session_factory: Optional[sessionmaker[Session]] = None):
        self._session_factory = session_factory

    @property
    def provider_name(self) -> str:
        return "sql"

    def _session(self):
        return session_scope(self._session_factory or get_sessionmaker())

    # ==================== Writes ====================

    def upsert_status(
        self,
        article_id: str,
        fields: Mapping[str, Any],
        *,
        insert_if_missing: bool = True,
        expected_run_id: Optional[str] = None,
    ) -> Optional[ArticleRecord]:
        values = self.validate_fields(fields)
        values["updated_at"] = _utcnow()

        try:
            with self._session() as session:
                if insert_if_missing:
                    stmt = self._build_upsert(session, article_id, values, expected_run_id)
                else:
                    stmt = update(_articles).where(_articles.c.article_id == article_id)
                    if expected_run_id is not None:
                        stmt = stmt.where(_articles.c.run_id == expected_run_id)
                    stmt = stmt.values(**values).returning(*_articles.c)

                row = session.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            logger.error(
                "Article upsert failed",
                extra={"article_id": article_id, "status": values.get("status"), "error": str(e)},
            )
            raise StoreError(f"Failed to write article {article_id}: {e}") from e

        if row is None:
            logger.debug(
                "Article upsert matched no row",
                extra={
                    "article_id": article_id,
                    "insert_if_missing": insert_if_missing,
                    "expected_run_id": expected_run_id,
                },
            )
            return None

        return ArticleRecord.model_validate(dict(row))

    def _build_upsert(
        self,
        session: Session,
        article_id: str,
        values: Dict[str, Any],
        expected_run_id: Optional[str],
    ):
        dialect = session.get_bind().dialect.name
        insert = _INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise StoreError(f"Upsert is not supported for dialect '{dialect}'")

        stmt = insert(_articles).values(article_id=article_id, **values)
        where = None
        if expected_run_id is not None:
            where = _articles.c.run_id == expected_run_id

        stmt = stmt.on_conflict_do_update(
            index_elements=[_articles.c.article_id],
            set_=values,
            where=where,
        )
        return stmt.returning(*_articles.c)

    # ==================== Reads ====================

    def get(self, article_id: str) -> Optional[ArticleRecord]:
        try:
            with self._session() as session:
                row = (
                    session.execute(
                        select(_articles).where(_articles.c.article_id == article_id)
                    )
                    .mappings()
                    .first()
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read article {article_id}: {e}") from e

        return ArticleRecord.model_validate(dict(row)) if row is not None else None

    def count_by_status(self) -> Dict[str, int]:
        try:
            with self._session() as session:
                rows = session.execute(
                    select(_articles.c.status, func.count()).group_by(_articles.c.status)
                ).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to count articles: {e}") from e

        return {status: int(count) for status, count in rows}
