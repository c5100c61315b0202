"""
Business logic for users.

The ``UserService`` is the user directory of the tracker: it creates
users and looks them up in the record store.  It never updates or
deletes users.
"""

import logging
from typing import List, Optional

from ..schemas.user import UserCreate, UserRead
from ..store.base import RecordStore


class UserService:
    """Service for creating and looking up users."""

    @classmethod
    async def create_user(cls, store: RecordStore, data: UserCreate) -> UserRead:
        """Persist a new user and return it with its generated id.

        Raises ``StoreError`` if the store cannot save the record.
        """
        logger = logging.getLogger(__name__)
        user = store.insert_user(data.username)
        logger.info("Created user %s (%r)", user.id, user.username)
        return UserRead.model_validate(user)

    @classmethod
    async def list_users(cls, store: RecordStore) -> List[UserRead]:
        """Return all users projected to id and username, in store order."""
        return [UserRead.model_validate(user) for user in store.find_users()]

    @classmethod
    async def get_user_by_id(cls, store: RecordStore, user_id: str) -> Optional[UserRead]:
        """Look up a single user; return ``None`` if it does not exist."""
        user = store.find_user_by_id(user_id)
        if user is None:
            logging.getLogger(__name__).info("User %s not found", user_id)
            return None
        return UserRead.model_validate(user)
