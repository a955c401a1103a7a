"""
Exception handlers translating failures into HTTP responses.

Domain errors raised anywhere in the request path are converted by
``handle_todo_error``.  Routing misses (unknown path, or a known path
with an unsupported method) surface from Starlette as ``HTTPException``
and are all reported as ``404 Not Found``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.app.core.codec import encode_error
from todo_api.app.core.errors import TodoError

logger = logging.getLogger(__name__)


async def handle_todo_error(request: Request, exc: TodoError) -> Response:
    logger.info(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return encode_error(exc.status_code, exc.message)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in (404, 405):
        logger.info("No route for %s %s", request.method, request.url.path)
        return encode_error(404, "Not Found")
    logger.warning("%s %s failed with %s", request.method, request.url.path, exc.status_code)
    return encode_error(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(TodoError, handle_todo_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
