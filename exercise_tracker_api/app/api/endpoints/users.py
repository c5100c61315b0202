"""
User endpoints.

Create users from a ``username`` form field and list all users.  No
authentication is required and usernames are not checked for
uniqueness.
"""

from typing import List

from fastapi import APIRouter, Depends, Form, status

from exercise_tracker_api.app.api.errors import raise_http_error
from exercise_tracker_api.app.schemas.user import UserCreate, UserRead
from exercise_tracker_api.app.services.user_service import UserService
from exercise_tracker_api.app.store import RecordStore, get_store


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    username: str = Form(""),
    store: RecordStore = Depends(get_store),
) -> UserRead:
    """Register a new user and return its id and username."""
    try:
        return await UserService.create_user(store, UserCreate(username=username))
    except Exception as exc:
        raise_http_error(exc)


@router.get("", response_model=List[UserRead])
async def list_users(store: RecordStore = Depends(get_store)) -> List[UserRead]:
    """List every user as ``{id, username}``.

    An empty store yields an empty list.
    """
    try:
        return await UserService.list_users(store)
    except Exception as exc:
        raise_http_error(exc)
