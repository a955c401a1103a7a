"""
Top‑level router for version 1 of the API.

This router aggregates resource routers.  When new resources are
added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todos" path internally.  Do not
# specify a prefix here or the endpoint would appear under ``/todos/todos``.
router.include_router(todos.router, tags=["todos"])
