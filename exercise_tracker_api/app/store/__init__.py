"""
Record store package.

``get_store`` returns the process‑wide store selected by
``settings.store_backend`` and is used as a FastAPI dependency by the
endpoints.  Tests replace it through ``app.dependency_overrides``.
"""

import logging
from typing import Optional

from ..core.config import settings
from .base import ExerciseFilter, ExerciseRecord, RecordStore, UserRecord
from .memory import MemoryStore
from .sqlite import SQLiteStore

__all__ = [
    "ExerciseFilter",
    "ExerciseRecord",
    "MemoryStore",
    "RecordStore",
    "SQLiteStore",
    "UserRecord",
    "close_store",
    "create_store",
    "get_store",
]

logger = logging.getLogger(__name__)

_store: Optional[RecordStore] = None


def create_store(backend: Optional[str] = None, database_url: Optional[str] = None) -> RecordStore:
    """Build a new store for ``backend`` (``sqlite`` or ``memory``)."""
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "sqlite":
        return SQLiteStore(database_url)
    raise ValueError(f"Unknown store backend: {backend}")


def get_store() -> RecordStore:
    global _store
    if _store is None:
        _store = create_store()
        logger.info("Using %s record store", type(_store).__name__)
    return _store


def close_store() -> None:
    global _store
    if _store is not None:
        _store.close()
        _store = None
