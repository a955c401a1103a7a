"""
In‑memory store for todo records.

``TodoStore`` keeps todos in insertion order inside a plain list.  All
operations take the store's lock for their full duration, so at most
one operation runs at a time and ``list`` never observes a partially
applied mutation.  Records are immutable ``Todo`` models, which means
values returned from the store can be shared without copying.

Lookups by title are linear scans; when several records share a title
the first one in insertion order is the one updated or deleted.
Nothing is persisted: the store starts empty and its contents are lost
when the process exits.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from todo_api.app.core.errors import DuplicateTitleError, NotFoundError
from todo_api.app.schemas.todo import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """Thread‑safe ordered collection of todos keyed by title."""

    def __init__(self, unique_titles: bool = False) -> None:
        self.unique_titles = unique_titles
        self._todos: List[Todo] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index_of(self, title: str) -> Optional[int]:
        # Caller must hold the lock.
        for index, todo in enumerate(self._todos):
            if todo.title == title:
                return index
        return None

    def create(self, todo: Todo) -> Todo:
        """Append ``todo`` and return the stored record.

        Duplicate titles are accepted unless the store was created with
        ``unique_titles=True``, in which case ``DuplicateTitleError`` is
        raised and the store is left unchanged.
        """
        with self._lock:
            if self.unique_titles and self._index_of(todo.title) is not None:
                raise DuplicateTitleError(f"Todo '{todo.title}' already exists")
            self._todos.append(todo)
            count = len(self._todos)
        logger.info("Created todo %r (%d stored)", todo.title, count)
        return todo

    def list(self) -> List[Todo]:
        """Return a snapshot of all todos in insertion order."""
        with self._lock:
            return list(self._todos)

    def update(self, todo: Todo) -> Todo:
        """Replace the first todo titled ``todo.title`` in place.

        Raises ``NotFoundError`` if no such todo exists.
        """
        with self._lock:
            index = self._index_of(todo.title)
            if index is None:
                raise NotFoundError()
            self._todos[index] = todo
        logger.info("Updated todo %r at position %d", todo.title, index)
        return todo

    def delete(self, todo: Todo) -> None:
        """Remove the first todo titled ``todo.title``.

        Only the title is used for matching; the completion flag of the
        incoming value is ignored.  Raises ``NotFoundError`` if no such
        todo exists.
        """
        with self._lock:
            index = self._index_of(todo.title)
            if index is None:
                raise NotFoundError()
            del self._todos[index]
        logger.info("Deleted todo %r from position %d", todo.title, index)
