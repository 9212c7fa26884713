"""Root conftest - shared fixtures.

Invariants:
    - Every test gets a fresh in-memory record store (own engine, own database)
    - get_todo_store dependency overridden to hand routes that store
    - The lifespan does not run under ASGITransport; the override replaces it
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from todo_api.infrastructure.todo_store import TodoStore, get_todo_store  # noqa: E402
from todo_api.main import app  # noqa: E402

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def store():
    todo_store = await TodoStore.open(MEMORY_URL)
    yield todo_store
    await todo_store.close()


@pytest.fixture
async def client(store):
    """FastAPI test client wired to the per-test store."""
    app.dependency_overrides[get_todo_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
