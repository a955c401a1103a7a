"""Entry point for the Todo API server.

This script serves the application with Uvicorn on the address given by
the ``HOST`` and ``PORT`` environment variables (``127.0.0.1:3100`` by
default).  See ``todo_api/app/core/config.py`` for the other supported
variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
