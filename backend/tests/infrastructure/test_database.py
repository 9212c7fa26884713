"""DatabaseSessionManager - URL detection and SQLAlchemy error mapping."""

import pytest
from sqlalchemy.exc import (
    IntegrityError, InvalidRequestError, OperationalError,
)

from todo_api.core.errors import DatabaseError
from todo_api.infrastructure.database import (
    DatabaseSessionManager, is_in_memory_sqlite,
)
from todo_api.models.todo import Todo


@pytest.mark.parametrize("url,expected", [
    ("sqlite+aiosqlite:///:memory:", True),
    ("sqlite+aiosqlite://", True),
    ("sqlite+aiosqlite:///todos.db", False),
])
def test_is_in_memory_sqlite(url, expected):
    assert is_in_memory_sqlite(url) is expected


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await m.create_schema()
    yield m
    await m.dispose()


async def test_sessions_share_one_in_memory_database(manager):
    async with manager.session() as db:
        db.add(Todo(name="shared"))
        await db.commit()

    async with manager.session() as db:
        assert (await db.get(Todo, 1)).name == "shared"


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("stmt", {}, Exception("dup")), "commit"),
    (OperationalError("stmt", {}, Exception("gone")), "execute"),
    (InvalidRequestError("bad"), "unknown"),
])
async def test_session_maps_sqlalchemy_errors(manager, exc, operation):
    with pytest.raises(DatabaseError) as info:
        async with manager.session():
            raise exc

    assert info.value.operation == operation
    assert info.value.http_status == 503
    assert info.value.__cause__ is exc


async def test_failed_session_is_rolled_back(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Todo(name="half"))
            await db.flush()
            raise OperationalError("stmt", {}, Exception("gone"))

    async with manager.session() as db:
        assert await db.get(Todo, 1) is None


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not mine")
