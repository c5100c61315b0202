"""
Application package initializer.

The project is organised into layers: ``api`` (routers and HTTP error
translation), ``services`` (user directory and exercise ledger),
``store`` (record store interface and backends), ``schemas``
(pydantic payloads) and ``core`` (configuration, logging, errors,
dates and the SQLite migrations).
"""

from .main import app  # noqa: F401
