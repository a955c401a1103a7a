"""
Domain exceptions raised while handling todo requests.

Each exception carries the HTTP status it maps to.  The handlers in
``exception_handlers`` turn them into plain‑text responses, so route
functions and the store simply raise and never build error responses
themselves.
"""


class TodoError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(TodoError):
    """The request body is not a well‑formed todo payload."""

    status_code = 400


class ValidationError(TodoError):
    """The payload parsed but violates a field constraint."""

    status_code = 400


class NotFoundError(TodoError):
    """No todo with the requested title exists."""

    status_code = 404

    def __init__(self, message: str = "Todo not found") -> None:
        super().__init__(message)


class DuplicateTitleError(TodoError):
    """A todo with the same title already exists (unique titles only)."""

    status_code = 409
