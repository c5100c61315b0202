"""
Pydantic schemas for exercise entries and exercise logs.

``ExerciseCreate`` holds the raw form values as sent by the client;
coercion of ``duration`` and ``date`` happens in ``ExerciseService``.
The read models describe the response shapes of the two exercise
endpoints.  ``date`` is always rendered as a calendar string such as
``Wed Jan 01 2020``.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    """Schema for logging a new exercise."""

    description: Optional[str] = Field(None, description="What was done")
    duration: Optional[str] = Field(None, description="Duration in minutes")
    date: Optional[str] = Field(None, description="ISO date, defaults to now")


class ExerciseRead(BaseModel):
    """Response of ``POST /api/users/{id}/exercises``.

    ``id`` and ``username`` belong to the owning user, not to the
    exercise record.
    """

    id: str
    username: str
    description: Optional[str]
    duration: Optional[Union[int, float]]
    date: str


class LogEntry(BaseModel):
    description: Optional[str]
    duration: Optional[Union[int, float]]
    date: str


class LogQuery(BaseModel):
    """Raw query parameters of ``GET /api/users/{id}/logs``."""

    date_from: Optional[str] = None
    date_to: Optional[str] = None
    limit: Optional[str] = None


class ExerciseLog(BaseModel):
    """Response of ``GET /api/users/{id}/logs``."""

    username: str
    count: int
    id: str
    log: List[LogEntry]
