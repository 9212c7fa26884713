"""Todo Routes - HTTP adapters over TodoStore.

Invariants:
    - Every response body is TodoItemDTO or a list of them (secret never serialized)
    - NotFound → 404 with an empty body
    - /todos/complete is declared before /todos/{todo_id}
"""

from fastapi import APIRouter, Depends, Response, status

from todo_api.core.lookup import Found, NotFound
from todo_api.infrastructure.todo_store import TodoStore, get_todo_store
from todo_api.schemas.todo import TodoItemDTO, TodoItemInput

router = APIRouter(prefix="/todos", tags=["todos"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Todo not found"}}


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=list[TodoItemDTO])
async def list_todos(store: TodoStore = Depends(get_todo_store)):
    return [TodoItemDTO.from_record(t) for t in await store.list_all()]


@router.get("/complete", response_model=list[TodoItemDTO])
async def list_completed_todos(store: TodoStore = Depends(get_todo_store)):
    return [TodoItemDTO.from_record(t) for t in await store.list_completed()]


@router.get("/{todo_id}", response_model=TodoItemDTO, responses=_NOT_FOUND)
async def get_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    match await store.get(todo_id):
        case Found(todo):
            return TodoItemDTO.from_record(todo)
        case NotFound():
            return _not_found()


@router.post(
    "", response_model=TodoItemDTO, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoItemInput,
    response: Response,
    store: TodoStore = Depends(get_todo_store),
):
    """Create a todo. The body id, if any, is ignored."""
    todo = await store.create(body.name, body.is_complete)
    response.headers["Location"] = f"/todos/{todo.id}"
    return TodoItemDTO.from_record(todo)


@router.put(
    "/{todo_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses=_NOT_FOUND,
)
async def update_todo(
    todo_id: int,
    body: TodoItemInput,
    store: TodoStore = Depends(get_todo_store),
):
    match await store.update(todo_id, body.name, body.is_complete):
        case Found():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case NotFound():
            return _not_found()


@router.delete("/{todo_id}", response_model=TodoItemDTO, responses=_NOT_FOUND)
async def delete_todo(todo_id: int, store: TodoStore = Depends(get_todo_store)):
    """Delete a todo; the body is its state before deletion."""
    match await store.delete(todo_id):
        case Found(todo):
            return TodoItemDTO.from_record(todo)
        case NotFound():
            return _not_found()
