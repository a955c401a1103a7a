"""
API endpoints for todos.

All four operations share the ``/todos`` path and are told apart by
method.  Write operations read the todo from the request body; the
body is decoded by hand instead of through a FastAPI body parameter so
that malformed payloads are reported as ``400`` by the codec rather
than as ``422`` by FastAPI.

Order of work for writes is always decode, then validate, then touch
the store, so a rejected payload never reaches the store.  Delete only
needs the title and skips validation.

| Method | Path   | Handler       |
|--------|--------|---------------|
| POST   | /todos | create_todo   |
| GET    | /todos | list_todos    |
| PUT    | /todos | update_todo   |
| DELETE | /todos | delete_todo   |
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from todo_api.app.core.codec import decode, encode, encode_empty
from todo_api.app.schemas.todo import validate_todo
from todo_api.app.services.todo_store import TodoStore

router = APIRouter()


def get_todo_store(request: Request) -> TodoStore:
    """Return the store owned by the running application."""
    return request.app.state.todo_store


@router.post("/todos", summary="Create a todo")
async def create_todo(request: Request, store: TodoStore = Depends(get_todo_store)) -> Response:
    """Append a new todo and return it."""
    todo = decode(await request.body())
    validate_todo(todo)
    return encode(store.create(todo))


@router.get("/todos", summary="List todos")
async def list_todos(store: TodoStore = Depends(get_todo_store)) -> Response:
    """Return every todo in insertion order."""
    return encode(store.list())


@router.put("/todos", summary="Replace a todo")
async def update_todo(request: Request, store: TodoStore = Depends(get_todo_store)) -> Response:
    """Replace the first todo with the same title.

    Returns HTTP 404 if no todo has that title.
    """
    todo = decode(await request.body())
    validate_todo(todo)
    return encode(store.update(todo))


@router.delete("/todos", summary="Delete a todo")
async def delete_todo(request: Request, store: TodoStore = Depends(get_todo_store)) -> Response:
    """Remove the first todo with the title given in the body."""
    store.delete(decode(await request.body()))
    return encode_empty()
