"""
Pydantic models for user data.

Users carry nothing but a store‑generated ``id`` and a free‑form
``username``; no uniqueness or format rules are applied.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field("", description="Display name, may be empty")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str

    model_config = {
        "from_attributes": True,
    }
