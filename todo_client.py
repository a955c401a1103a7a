"""Todo API client.

This module defines a small client wrapper around the Todo API's
``/todos`` collection.  The client uses the ``requests`` library
internally to make HTTP calls and never raises on HTTP or network
failures; every method returns a tuple whose second element describes
the error, if any.

The client exposes one method per operation:

* :meth:`TodoClient.list_todos` – return all todos.
* :meth:`TodoClient.create_todo` – add a todo.
* :meth:`TodoClient.update_todo` – replace the todo with the same title.
* :meth:`TodoClient.delete_todo` – remove the todo with the given title.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:3100"

Error = Dict[str, Any]


class TodoClient:
    """Client for interacting with the Todo API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://127.0.0.1:3100``.
                Include the route prefix if the server was started with one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT`` or ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/todos``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` is a dictionary with keys ``status_code`` and
            ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # Error bodies are plain text.
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all todos in insertion order.

        Returns:
            A tuple ``(todos, error)``. ``todos`` is empty on failure.
        """
        data, error = self._request("GET", "/todos")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_todo(self, title: str, completed: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a todo and return the stored record."""
        return self._request("POST", "/todos", json_body={"title": title, "completed": completed})

    def update_todo(self, title: str, completed: bool) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the todo titled ``title``.

        A missing todo is reported as an error with ``status_code`` 404.
        """
        return self._request("PUT", "/todos", json_body={"title": title, "completed": completed})

    def delete_todo(self, title: str, completed: bool = False) -> Tuple[bool, Optional[Error]]:
        """Delete the todo titled ``title``.

        The server matches on the title only; ``completed`` is sent
        because the payload shape requires it.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", "/todos", json_body={"title": title, "completed": completed})
        if error:
            return False, error
        return True, None
