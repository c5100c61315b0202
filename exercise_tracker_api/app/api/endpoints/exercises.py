"""
Exercise endpoints.

These routes hang below a user: ``POST /users/{user_id}/exercises``
logs a new entry and ``GET /users/{user_id}/logs`` returns the user's
exercise history, optionally bounded by ``from``/``to`` dates and
capped by ``limit``.  Query and form values are passed through as text
and coerced by ``ExerciseService``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, status

from exercise_tracker_api.app.api.errors import raise_http_error
from exercise_tracker_api.app.schemas.exercise import ExerciseCreate, ExerciseLog, ExerciseRead, LogQuery
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.store import RecordStore, get_store


router = APIRouter()


@router.post(
    "/{user_id}/exercises",
    response_model=ExerciseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Log an exercise",
)
async def create_exercise(
    user_id: str,
    description: Optional[str] = Form(None),
    duration: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    store: RecordStore = Depends(get_store),
) -> ExerciseRead:
    """Log an exercise for the user.

    ``date`` defaults to the current time.  Responds with 404 if the
    user does not exist.
    """
    data = ExerciseCreate(description=description, duration=duration, date=date)
    try:
        return await ExerciseService.append_exercise(store, user_id, data)
    except Exception as exc:
        raise_http_error(exc)


@router.get(
    "/{user_id}/logs",
    response_model=ExerciseLog,
    summary="Get a user's exercise log",
)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive lower date bound"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive upper date bound"),
    limit: Optional[str] = Query(None, description="Maximum number of entries, default 500"),
    store: RecordStore = Depends(get_store),
) -> ExerciseLog:
    query = LogQuery(date_from=date_from, date_to=date_to, limit=limit)
    try:
        return await ExerciseService.get_log_summary(store, user_id, query)
    except Exception as exc:
        raise_http_error(exc)
