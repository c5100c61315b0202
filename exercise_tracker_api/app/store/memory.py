"""
In‑memory record store.

Keeps users in a dict and exercises in an insertion‑ordered list.
Nothing survives a restart; use it for tests or throwaway demos
(``STORE_BACKEND=memory``).
"""

from datetime import datetime
from typing import Dict, List, Optional

from .base import ExerciseFilter, ExerciseRecord, Number, RecordStore, UserRecord, new_record_id


class MemoryStore(RecordStore):
    def __init__(self) -> None:
        self._users: Dict[str, UserRecord] = {}
        self._exercises: List[ExerciseRecord] = []

    def close(self) -> None:
        self._users.clear()
        self._exercises.clear()

    def insert_user(self, username: str) -> UserRecord:
        user = UserRecord(id=new_record_id(), username=username)
        self._users[user.id] = user
        return user

    def find_users(self) -> List[UserRecord]:
        return list(self._users.values())

    def find_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)

    def insert_exercise(
        self,
        user_id: str,
        description: Optional[str],
        duration: Optional[Number],
        date: datetime,
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=new_record_id(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )
        self._exercises.append(exercise)
        return exercise

    def find_exercises(self, criteria: ExerciseFilter) -> List[ExerciseRecord]:
        matches: List[ExerciseRecord] = []
        for exercise in self._exercises:
            if criteria.limit is not None and len(matches) >= criteria.limit:
                break
            if exercise.user_id != criteria.user_id:
                continue
            if criteria.date_from is not None and exercise.date < criteria.date_from:
                continue
            if criteria.date_to is not None and exercise.date > criteria.date_to:
                continue
            matches.append(exercise)
        return matches
