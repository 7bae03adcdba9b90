"""Recommendation engine schemas."""
from pydantic import Field

from studio.schemas.common import CamelModel


class ChatQuestion(CamelModel):
    id: str
    question: str
    options: list[str]


class PackageRecommendation(CamelModel):
    key: str
    name: str
    price: str
    features: list[str]
    timeline: str


class RecommendationRequest(CamelModel):
    answers: list[str] = Field(default_factory=list, max_length=20)
