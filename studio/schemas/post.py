"""Post, tag and comment schemas."""
from datetime import datetime

from pydantic import Field

from studio.schemas.common import CamelModel
from studio.schemas.user import AuthorSummary


class TagCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{3,8}$")


class TagResponse(CamelModel):
    id: str
    name: str
    color: str | None = None


class PostCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    published: bool = False
    tag_ids: list[str] | None = None


class PostUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    published: bool | None = None
    tag_ids: list[str] | None = None


class CommentCreate(CamelModel):
    content: str = Field(min_length=1, max_length=2000)


class CommentResponse(CamelModel):
    id: str
    content: str
    author_id: str
    post_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorSummary | None = None


class PostResponse(CamelModel):
    id: str
    title: str
    content: str
    published: bool
    author_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorSummary | None = None
    tags: list[TagResponse] = []
    like_count: int = 0
    comment_count: int = 0


class PostDetailResponse(PostResponse):
    comments: list[CommentResponse] = []
