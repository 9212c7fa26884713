"""Fallback & Docs - what happens to requests no Todo route takes.

Tests:
    - Unknown paths (any method) → 302 to /swagger, in every environment
    - Known path with a trailing slash → 307 to the path without it
    - Known path, unsupported method → 405 with Allow
    - /swagger and /openapi.json served only in development
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.infrastructure.todo_store import get_todo_store
from todo_api.main import create_app


@pytest.mark.parametrize("method,path", [
    ("GET", "/"),
    ("GET", "/nothing/here"),
    ("POST", "/widgets"),
    ("DELETE", "/todos/1/extra"),
])
async def test_unmatched_request_redirects_to_docs(client, method, path):
    res = await client.request(method, path)

    assert res.status_code == 302
    assert res.headers["location"] == "/swagger"


async def test_trailing_slash_redirects_to_route(client):
    res = await client.get("/todos/?x=1")

    assert res.status_code == 307
    assert res.headers["location"].endswith("/todos?x=1")


async def test_trailing_slash_redirect_reaches_list(client):
    await client.post("/todos", json={"name": "A"})

    res = await client.get("/todos/", follow_redirects=True)

    assert res.status_code == 200
    assert [t["name"] for t in res.json()] == ["A"]


async def test_unsupported_method_on_known_path_is_405(client):
    res = await client.patch("/todos/1", json={"name": "x"})

    assert res.status_code == 405
    assert {"GET", "PUT", "DELETE"} <= set(res.headers["allow"].split(", "))


async def test_swagger_ui_served_in_development(client):
    res = await client.get("/swagger")
    assert res.status_code == 200
    assert "swagger" in res.text.lower()


async def test_openapi_lists_todo_routes(client):
    schema = (await client.get("/openapi.json")).json()

    assert "/todos" in schema["paths"]
    assert "/todos/{todo_id}" in schema["paths"]
    assert "/todos/complete" in schema["paths"]
    assert "/{path}" not in schema["paths"]


async def test_openapi_dto_has_no_secret(client):
    schema = (await client.get("/openapi.json")).json()

    props = schema["components"]["schemas"]["TodoItemDTO"]["properties"]
    assert set(props) == {"id", "name", "isComplete"}


@pytest.fixture
async def production_client(store):
    prod_app = create_app(Settings(environment="production"))
    prod_app.dependency_overrides[get_todo_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=prod_app), base_url="http://test",
    ) as c:
        yield c


async def test_docs_not_served_outside_development(production_client):
    for path in ("/swagger", "/openapi.json"):
        res = await production_client.get(path)
        assert res.status_code == 302
        assert res.headers["location"] == "/swagger"


async def test_unmatched_path_redirects_outside_development(production_client):
    res = await production_client.get("/nothing/here")

    assert res.status_code == 302
    assert res.headers["location"] == "/swagger"


async def test_todo_routes_still_served_outside_development(production_client):
    res = await production_client.post("/todos", json={"name": "x"})
    assert res.status_code == 201
