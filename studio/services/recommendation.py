"""
Website package recommendation.

Backs the site's chatbot: the visitor answers three fixed questions (site
type, features, timeline) and gets one of three static packages. Rules are
checked in order and the first match wins:

1. an e-commerce site, or any advanced feature -> premium
2. a landing page -> frontend
3. anything else -> fullstack
"""
from typing import Iterable

from studio.schemas.recommendation import ChatQuestion, PackageRecommendation

ECOMMERCE = "E-commerce Store"
LANDING_PAGE = "Landing Page"
ADVANCED_FEATURES = frozenset({"Admin Panel", "User Authentication", "Payment Integration"})

QUESTIONS = [
    ChatQuestion(
        id="start",
        question=(
            "Hi! I'm here to help you choose the perfect website package. "
            "What type of website are you looking to build?"
        ),
        options=["Landing Page", "Business Website", "E-commerce Store", "Blog"],
    ),
    ChatQuestion(
        id="features",
        question="What features do you need for your website?",
        options=[
            "Contact Forms",
            "Blog/News Section",
            "Admin Panel",
            "User Authentication",
            "Payment Integration",
            "SEO Optimization",
        ],
    ),
    ChatQuestion(
        id="timeline",
        question="What's your preferred timeline for completion?",
        options=["1-2 weeks", "3-4 weeks", "1-2 months", "Flexible"],
    ),
]

PACKAGES = {
    "frontend": PackageRecommendation(
        key="frontend",
        name="Frontend Development Pack",
        price="$499 - $1,999",
        features=[
            "Responsive Design",
            "Modern UI/UX",
            "Contact Forms",
            "Basic SEO",
            "Mobile Optimized",
        ],
        timeline="1-2 weeks",
    ),
    "fullstack": PackageRecommendation(
        key="fullstack",
        name="Full Stack Website Pack",
        price="$1,999 - $4,999",
        features=[
            "Frontend + Backend",
            "Database Integration",
            "User Authentication",
            "Admin Panel",
            "API Development",
            "Advanced SEO",
        ],
        timeline="3-4 weeks",
    ),
    "premium": PackageRecommendation(
        key="premium",
        name="Premium Enterprise Pack",
        price="$4,999 - $9,999",
        features=[
            "Everything in Full Stack",
            "E-commerce Features",
            "Payment Integration",
            "Advanced Analytics",
            "Hosting & Maintenance",
            "24/7 Support",
        ],
        timeline="1-2 months",
    ),
}


def get_questions() -> list[ChatQuestion]:
    return list(QUESTIONS)


def recommend(answers: Iterable[str]) -> PackageRecommendation:
    """Pick a package for the given chatbot answers."""
    answer_set = set(answers)
    if ECOMMERCE in answer_set or answer_set & ADVANCED_FEATURES:
        key = "premium"
    elif LANDING_PAGE in answer_set:
        key = "frontend"
    else:
        key = "fullstack"
    return PACKAGES[key].model_copy(deep=True)
