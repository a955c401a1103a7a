"""
Wire codec for todo payloads.

Request bodies are decoded strictly: the body must be a JSON object
with a string ``title`` and a boolean ``completed``.  Unknown keys are
ignored.  Any other input raises ``DecodeError`` rather than failing
the request handler.

Successful results are encoded as compact JSON with an
``application/json`` content type; errors are sent as plain text.
"""

from typing import Sequence, Union

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError as PydanticValidationError

from todo_api.app.core.errors import DecodeError
from todo_api.app.schemas.todo import Todo


def decode(body: bytes) -> Todo:
    """Parse a request body into a ``Todo``.

    Raises
    ------
    DecodeError
        If the body is not valid JSON or does not have the todo shape.
    """
    try:
        return Todo.model_validate_json(body, strict=True)
    except PydanticValidationError as exc:
        raise DecodeError(f"Invalid request body: {_describe(exc)}") from exc


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(item) for item in error.get("loc", ()))
        if location:
            parts.append(f"{location}: {error['msg']}")
        else:
            parts.append(error["msg"])
    return "; ".join(parts)


def encode(value: Union[Todo, Sequence[Todo]]) -> Response:
    """Serialize a todo or a sequence of todos into a JSON response."""
    if isinstance(value, Todo):
        content = value.model_dump()
    else:
        content = [todo.model_dump() for todo in value]
    return JSONResponse(content=content, status_code=200)


def encode_empty() -> Response:
    """Return a successful response without a body."""
    return Response(status_code=200)


def encode_error(status_code: int, message: str) -> Response:
    """Wrap ``message`` in a plain‑text response with ``status_code``."""
    return PlainTextResponse(message, status_code=status_code)
