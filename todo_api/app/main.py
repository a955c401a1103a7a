"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn todo_api.app.main:app --host 127.0.0.1 --port 3100

Each application owns exactly one ``TodoStore`` which lives on
``app.state.todo_store`` for the lifetime of the process.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.exception_handlers import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.todo_store import TodoStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TodoStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Defaults to the module‑level settings read
        from the environment.
    store : Optional[TodoStore]
        Store to serve.  A new empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    # Paths are matched exactly: no trailing slash redirects, and the
    # documentation routes only exist in debug mode.
    docs_kwargs = {}
    if not settings.debug:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
        **docs_kwargs,
    )

    app.state.settings = settings
    app.state.todo_store = store if store is not None else TodoStore(unique_titles=settings.unique_titles)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
