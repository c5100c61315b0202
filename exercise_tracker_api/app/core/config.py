"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables.  A ``.env`` file (found by ``python-dotenv`` next to the
project or given explicitly to ``load_settings``) is loaded first;
variables already present in the environment win over the file.
Defaults are provided for all fields so the service starts with a
local SQLite file and no further setup.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_int(name: str, default: int):
    def read() -> int:
        value = os.getenv(name, "")
        try:
            return int(value) if value.strip() else default
        except ValueError:
            return default

    return field(default_factory=read)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = _env("API_VERSION", "1.0.0")
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: str = _env("LOG_FILE", "")

    # Path of the SQLite file backing the record store, optionally as a
    # ``sqlite:///`` URL.  Relative paths are resolved against the
    # project root by the ``db`` module.
    database_url: str = _env("DATABASE_URL", "exercise_tracker.db")

    # ``sqlite`` or ``memory``.  The memory backend loses all records on
    # restart and is meant for tests and demos.
    store_backend: str = _env("STORE_BACKEND", "sqlite")

    host: str = _env("HOST", "0.0.0.0")
    port: int = _env_int("PORT", 3000)

    # Comma‑separated list of allowed origins, ``*`` allows any.
    cors_origins: str = _env("CORS_ORIGINS", "*")

    # Cap applied to log queries when the caller gives no usable limit.
    default_log_limit: int = _env_int("DEFAULT_LOG_LIMIT", 500)

    def __post_init__(self) -> None:
        self.store_backend = self.store_backend.lower()

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load ``env_file`` (or the nearest ``.env``) and build ``Settings``."""
    load_dotenv(env_file)
    return Settings()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = load_settings()
