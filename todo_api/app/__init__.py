"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is split by concern: ``schemas`` holds the todo
record and its validation rules, ``services`` the in‑memory store,
``core`` configuration, logging, errors and the wire codec, and
``api`` the versioned route table.
"""

from .main import app, create_app  # noqa: F401
