"""User schemas."""
from datetime import datetime

from pydantic import Field

from studio.schemas.common import CamelModel


class AuthorSummary(CamelModel):
    """Public subset of a user, embedded in posts, comments and reviews."""

    id: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None


class UserResponse(AuthorSummary):
    email: str
    role: str
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileUpdate(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    avatar: str | None = Field(default=None, max_length=512)
