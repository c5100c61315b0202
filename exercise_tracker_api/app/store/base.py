"""
Record store interface.

The services never talk to a database directly; they call into a
``RecordStore`` which offers insert/find/find‑by‑id over the two
record kinds (users and exercises).  Concrete stores live next to this
module: ``SQLiteStore`` for persistent deployments and ``MemoryStore``
for tests and demos.  Implementations must raise
``core.errors.StoreError`` when the underlying storage fails.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

Number = Union[int, float]


@dataclass
class UserRecord:
    id: str
    username: str


@dataclass
class ExerciseRecord:
    id: str
    user_id: str
    description: Optional[str]
    duration: Optional[Number]
    date: datetime


@dataclass
class ExerciseFilter:
    """Criteria for ``RecordStore.find_exercises``.

    ``date_from`` and ``date_to`` are inclusive bounds; ``None`` leaves
    that side open.  ``limit`` caps the number of returned records,
    ``None`` means no cap.
    """

    user_id: str
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    limit: Optional[int] = None


def new_record_id() -> str:
    """Return a random opaque identifier of 24 hex digits."""
    return uuid.uuid4().hex[:24]


class RecordStore(ABC):
    """Capability set required by the User Directory and Exercise Ledger."""

    def init(self) -> None:
        """Prepare the store for use (create schema, open connections)."""

    def close(self) -> None:
        """Release any resources held by the store."""

    @abstractmethod
    def insert_user(self, username: str) -> UserRecord:
        ...

    @abstractmethod
    def find_users(self) -> List[UserRecord]:
        """Return all users in the store's natural order."""

    @abstractmethod
    def find_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def insert_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Optional[Number],
        date: datetime,
    ) -> ExerciseRecord:
        ...

    @abstractmethod
    def find_exercises(self, criteria: ExerciseFilter) -> List[ExerciseRecord]:
        """Return exercises matching ``criteria`` in insertion order."""
