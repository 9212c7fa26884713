"""Database Session Manager - async engine and sessions that map driver failures.

Invariants:
    - A failing session is rolled back before the error leaves it
    - Every SQLAlchemyError leaves session() as core.errors.DatabaseError
    - An in-memory SQLite URL yields ONE shared connection (StaticPool);
      a second connection would open a second, empty database

Design Decisions:
    - expire_on_commit=False: records stay readable after the session closes,
      routes map them to DTOs outside the unit of work
    - Owned by TodoStore, not a module singleton: the app lifespan creates
      and disposes it
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from todo_api.core.errors import DatabaseError
from todo_api.db.base import Base
import todo_api.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError are DBAPIErrors
_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
)


def is_in_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _engine_options(database_url: str) -> dict[str, Any]:
    if is_in_memory_sqlite(database_url):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {}


def _classify(exc: SQLAlchemyError) -> tuple[str, str]:
    """(message, operation) for a SQLAlchemy failure."""
    for exc_type, message, operation in _FAILURES:
        if isinstance(exc, exc_type):
            return message, operation
    return "Database operation failed", "unknown"


class DatabaseSessionManager:
    """Owns the engine for one database URL and hands out sessions."""

    def __init__(self, database_url: str):
        self.engine = create_async_engine(
            database_url, **_engine_options(database_url),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                message, operation = _classify(e)
                logger.error(
                    f"DB {operation} failed: {e}",
                    extra={"error_code": "DATABASE_ERROR"},
                )
                raise DatabaseError(message, operation) from e
