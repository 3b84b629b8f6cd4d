"""User model and schema.

Reserved for future authentication; no endpoint exposes users yet.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Stored user account."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    username: str
    password: str


class UserCreate(BaseModel):
    """Schema for creating a user."""

    username: str
    password: str
