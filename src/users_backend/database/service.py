"""Database session management utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from users_backend.database.base import BaseSchema
from users_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
        **engine_options: Any,
    ) -> None:
        config = settings or get_settings()
        self._engine = create_engine(url or config.database_url, **engine_options)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_schema(self) -> None:
        """Create missing tables for every registered schema."""

        BaseSchema.metadata.create_all(self._engine)
        logger.info("Database schema ready on %s", self._engine.url.render_as_string())

    def dispose(self) -> None:
        """Release all pooled connections."""

        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            if session.in_transaction():
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
