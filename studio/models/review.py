"""Review model."""
from sqlalchemy import Boolean, Column, String, Integer, DateTime, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from studio.models.base import Base


class Review(Base):
    """Client review of the studio. Hidden from the public until approved."""
    __tablename__ = "reviews"
    __table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating"),)

    id = Column(String(36), primary_key=True, index=True)
    rating = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)
    # unique: a user owns at most one review
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, unique=True)
    is_approved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    author = relationship("User", back_populates="review")
