"""Package recommendation routes for the site chatbot."""
from fastapi import APIRouter

from studio.schemas.common import envelope, dump
from studio.schemas.recommendation import RecommendationRequest
from studio.services import recommendation as recommendation_service

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.get("/questions")
def get_questions():
    return envelope({"questions": [dump(q) for q in recommendation_service.get_questions()]})


@router.post("")
def recommend_package(body: RecommendationRequest):
    package = recommendation_service.recommend(body.answers)
    return envelope(
        {"package": dump(package)},
        f"Based on your requirements, we recommend the {package.name}.",
    )
