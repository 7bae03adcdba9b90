"""Review schemas."""
from datetime import datetime

from pydantic import Field, StrictBool

from studio.schemas.common import CamelModel
from studio.schemas.user import AuthorSummary


class ReviewCreate(CamelModel):
    rating: int = Field(ge=1, le=5)
    content: str = Field(min_length=10, max_length=1000)


class ReviewUpdate(CamelModel):
    rating: int | None = Field(default=None, ge=1, le=5)
    content: str | None = Field(default=None, min_length=10, max_length=1000)


class ReviewApproval(CamelModel):
    is_approved: StrictBool


class ReviewResponse(CamelModel):
    id: str
    rating: int
    content: str
    author_id: str
    is_approved: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorSummary | None = None
