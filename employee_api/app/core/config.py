"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Values
are read when a ``Settings`` instance is created, so tests can set
environment variables and build a fresh instance.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_bool(name: str, default: str = "false"):
    return field(default_factory=lambda: os.getenv(name, default).lower() in {"1", "true", "yes"})


def _env_int(name: str, default: str):
    return field(default_factory=lambda: int(os.getenv(name, default)))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Employee API")
    api_version: str = _env("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is installed.
    log_file: str = _env("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = _env("DATABASE_URL", "employees.db")

    # Address used by ``run.py`` when serving the API with uvicorn.
    api_host: str = _env("API_HOST", "0.0.0.0")
    api_port: int = _env_int("API_PORT", "8000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
