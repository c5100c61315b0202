"""
Top‑level API router.

Aggregates the domain routers under a common prefix.  Both routers
share the ``/users`` prefix because exercises are addressed through
their owning user.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
