"""
Business logic for exercises.

``ExerciseService`` is the exercise ledger: it appends exercise
entries for existing users and answers filtered, capped log queries.
Exercises reference their user by id only.  The store does not
enforce that reference, so the service looks the user up before
writing.

Log queries always filter on the user id.  ``from`` and ``to`` add
inclusive bounds on the exercise date; a ``to`` given as a bare date
covers that whole calendar day.  The number of returned entries is
capped by ``limit`` (see ``coerce_limit``).  Results keep the store's
natural (insertion) order.
"""

import logging
import math
from datetime import datetime
from typing import List, Optional, Union

from ..core.config import settings
from ..core.dates import end_of_day, is_date_only, parse_date, to_date_string
from ..core.errors import NotFoundError, ValidationError
from ..schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseRead, LogEntry, LogQuery
from ..schemas.user import UserRead
from ..store.base import ExerciseFilter, RecordStore
from .user_service import UserService

logger = logging.getLogger(__name__)

# Largest value SQLite accepts for LIMIT (signed 64-bit integer).
MAX_LIMIT = 2**63 - 1


def coerce_limit(raw: Optional[str], default: int) -> int:
    """Turn the raw ``limit`` query value into a result cap.

    Missing, empty, non‑numeric, zero, NaN and infinite values all fall
    back to ``default``.  Other values are truncated to an integer and
    their absolute value is used, capped at ``MAX_LIMIT``.
    """
    if raw is None or not str(raw).strip():
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric limit %r", raw)
        return default
    if not math.isfinite(value):
        return default
    limit = min(abs(int(value)), MAX_LIMIT)
    return limit or default


def coerce_duration(raw: Optional[str]) -> Optional[Union[int, float]]:
    """Convert the raw ``duration`` form value to a number of minutes.

    Integral values become ``int`` so that ``30`` is echoed back as
    ``30`` rather than ``30.0``.  Raises ``ValidationError`` for text
    that is not a finite number.
    """
    if raw is None or not str(raw).strip():
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid duration: {raw!r}") from exc
    if not math.isfinite(value):
        raise ValidationError(f"Invalid duration: {raw!r}")
    return int(value) if value.is_integer() else value


def build_filter(user_id: str, query: LogQuery, default_limit: Optional[int] = None) -> ExerciseFilter:
    """Translate raw log query parameters into an ``ExerciseFilter``."""
    criteria = ExerciseFilter(
        user_id=user_id,
        limit=coerce_limit(query.limit, default_limit or settings.default_log_limit),
    )
    if query.date_from:
        criteria.date_from = parse_date(query.date_from)
    if query.date_to:
        date_to = parse_date(query.date_to)
        criteria.date_to = end_of_day(date_to) if is_date_only(query.date_to) else date_to
    return criteria


class ExerciseService:
    """Service for appending and querying exercise entries."""

    @classmethod
    async def _require_user(cls, store: RecordStore, user_id: str) -> UserRead:
        user = await UserService.get_user_by_id(store, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @classmethod
    async def append_exercise(
        cls,
        store: RecordStore,
        user_id: str,
        data: ExerciseCreate,
        now: Optional[datetime] = None,
    ) -> ExerciseRead:
        """Log an exercise for an existing user.

        The user is resolved first; ``NotFoundError`` is raised and
        nothing is written if it does not exist.  ``date`` defaults to
        ``now`` (the current local time unless given).  The stored
        entry is returned merged with the user's id and username.
        """
        user = await cls._require_user(store, user_id)
        duration = coerce_duration(data.duration)
        date = parse_date(data.date) if data.date else (now or datetime.now())
        exercise = store.insert_exercise(
            user_id=user.id,
            description=data.description,
            duration=duration,
            date=date,
        )
        logger.info("Logged exercise %s for user %s", exercise.id, user.id)
        return ExerciseRead(
            id=user.id,
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=to_date_string(exercise.date),
        )

    @classmethod
    async def query_log(cls, store: RecordStore, user_id: str, query: LogQuery) -> List[LogEntry]:
        """Return the user's exercises matching ``query`` as log entries.

        Does not check that the user exists.
        """
        criteria = build_filter(user_id, query)
        exercises = store.find_exercises(criteria)
        return [
            LogEntry(
                description=exercise.description,
                duration=exercise.duration,
                date=to_date_string(exercise.date),
            )
            for exercise in exercises
        ]

    @classmethod
    async def get_log_summary(cls, store: RecordStore, user_id: str, query: LogQuery) -> ExerciseLog:
        """Return username, id, count and log entries for a user.

        Raises ``NotFoundError`` if the user does not exist.  A user
        without exercises yields ``count == 0`` and an empty log.
        """
        user = await cls._require_user(store, user_id)
        log = await cls.query_log(store, user.id, query)
        return ExerciseLog(username=user.username, count=len(log), id=user.id, log=log)
