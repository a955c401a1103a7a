"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and bind
the service to the loopback interface on port 3100.  Tests and
embedding code may build their own ``Settings`` and pass it to
``create_app`` instead of relying on the environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the launcher binds to.  The service is meant to be reached
    # locally, so the default is the loopback interface.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3100"))

    # Optional prefix for all routes.  Empty by default so the collection
    # is served at ``/todos``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # When enabled, creating a todo whose title is already present is
    # rejected with 409 instead of appending a duplicate.  Update and
    # delete always act on the first match regardless of this flag.
    unique_titles: bool = _env_flag("UNIQUE_TITLES")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
