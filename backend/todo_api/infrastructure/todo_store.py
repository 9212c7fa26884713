"""Todo Store - the record store: insert, lookup, update, delete, scan.

Invariants:
    - Every operation, ping included, runs under one asyncio.Lock owned by
      the store: the shared in-memory connection never sees two units of work
    - ids come from SQLite INTEGER PRIMARY KEY AUTOINCREMENT, unique and never reused
    - get/update/delete return Found | NotFound, never None
    - update touches only name and is_complete
    - A DatabaseError raised by an id-based operation carries that id

Design Decisions:
    - One store per app, created in the lifespan and placed on app.state;
      routes receive it through the get_todo_store dependency
    - Records are returned detached (expire_on_commit=False) so routes can
      read them after the session closes
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.errors import DatabaseError
from todo_api.core.lookup import Found, Lookup, NotFound
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """In-memory Todo collection backed by SQLAlchemy."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, database_url: str) -> "TodoStore":
        """Build the engine and create the schema."""
        db = DatabaseSessionManager(database_url)
        await db.create_schema()
        return cls(db)

    async def close(self) -> None:
        await self._db.dispose()

    @asynccontextmanager
    async def _unit_of_work(
        self, todo_id: int | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        async with self._lock:
            try:
                async with self._db.session() as db:
                    yield db
            except DatabaseError as e:
                e.context.todo_id = todo_id
                raise

    async def list_all(self) -> list[Todo]:
        async with self._unit_of_work() as db:
            result = await db.execute(select(Todo).order_by(Todo.id))
            return list(result.scalars().all())

    async def list_completed(self) -> list[Todo]:
        async with self._unit_of_work() as db:
            result = await db.execute(
                select(Todo).where(Todo.is_complete.is_(True)).order_by(Todo.id),
            )
            return list(result.scalars().all())

    async def get(self, todo_id: int) -> Lookup[Todo]:
        async with self._unit_of_work(todo_id) as db:
            todo = await db.get(Todo, todo_id)
        if todo is None:
            logger.debug("Todo not found", extra={"todo_id": todo_id})
            return NotFound()
        return Found(todo)

    async def create(self, name: str, is_complete: bool = False) -> Todo:
        async with self._unit_of_work() as db:
            todo = Todo(name=name, is_complete=is_complete)
            db.add(todo)
            await db.commit()
            await db.refresh(todo)
        logger.info("Todo created", extra={"todo_id": todo.id})
        return todo

    async def update(
        self, todo_id: int, name: str, is_complete: bool,
    ) -> Lookup[Todo]:
        async with self._unit_of_work(todo_id) as db:
            todo = await db.get(Todo, todo_id)
            if todo is None:
                logger.debug("Todo not found for update", extra={"todo_id": todo_id})
                return NotFound()
            todo.name = name
            todo.is_complete = is_complete
            await db.commit()
        logger.info("Todo updated", extra={"todo_id": todo_id})
        return Found(todo)

    async def delete(self, todo_id: int) -> Lookup[Todo]:
        """Remove a record. Found carries its pre-deletion state."""
        async with self._unit_of_work(todo_id) as db:
            todo = await db.get(Todo, todo_id)
            if todo is None:
                logger.debug("Todo not found for delete", extra={"todo_id": todo_id})
                return NotFound()
            await db.delete(todo)
            await db.commit()
        logger.info("Todo deleted", extra={"todo_id": todo_id})
        return Found(todo)

    async def ping(self) -> bool:
        """Readiness check: can the store run a statement."""
        try:
            async with self._unit_of_work() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError as e:
            logger.warning(f"Record store ping failed: {e.message}")
            return False
        return True


def get_todo_store(request: Request) -> TodoStore:
    """FastAPI dependency for the app's record store."""
    store = getattr(request.app.state, "todo_store", None)
    if store is None:
        raise RuntimeError("Todo store not initialized")
    return store
