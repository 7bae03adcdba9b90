"""Database models."""
from studio.models.base import Base
from studio.models.user import User, UserRole
from studio.models.post import Post, Tag, Comment, Like, post_tags
from studio.models.review import Review

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Post",
    "Tag",
    "Comment",
    "Like",
    "post_tags",
    "Review",
]
