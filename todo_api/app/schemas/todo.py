"""
Pydantic schema for todo records.

A todo is identified by its ``title``; there is no surrogate key.  The
model itself only enforces the wire shape (a string title and a boolean
completion flag).  Length rules are checked separately by
``validate_todo`` so that a delete request can be matched by title
without being rejected for a title that could never have been stored.
"""

from pydantic import BaseModel, ConfigDict, Field

from todo_api.app.core.errors import ValidationError

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100


class Todo(BaseModel):
    """A single todo record."""

    # Frozen so that records handed out by the store cannot be changed
    # outside of its lock.
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Title of the todo; unique key within the store")
    completed: bool = Field(..., description="Whether the todo has been completed")


def validate_todo(todo: Todo) -> None:
    """Check the field constraints of ``todo``.

    Raises
    ------
    ValidationError
        If the title is empty or longer than ``TITLE_MAX_LENGTH``
        characters.
    """
    length = len(todo.title)
    if length < TITLE_MIN_LENGTH:
        raise ValidationError("Validation error: title must not be empty")
    if length > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Validation error: title must be at most {TITLE_MAX_LENGTH} characters (got {length})"
        )
