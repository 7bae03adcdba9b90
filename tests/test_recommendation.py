"""Tests for the package recommendation engine."""
import itertools

import pytest

from studio.services.recommendation import QUESTIONS, PACKAGES, recommend, get_questions

SITE_TYPES, FEATURES, TIMELINES = (q.options for q in QUESTIONS)
PREMIUM_FEATURES = {"Admin Panel", "User Authentication", "Payment Integration"}


def _expected(site_type, feature):
    if site_type == "E-commerce Store" or feature in PREMIUM_FEATURES:
        return "premium"
    if site_type == "Landing Page":
        return "frontend"
    return "fullstack"


def test_every_answer_combination_maps_to_expected_package():
    seen = set()
    for site_type, feature, timeline in itertools.product(SITE_TYPES, FEATURES, TIMELINES):
        pkg = recommend([site_type, feature, timeline])
        assert pkg.key == _expected(site_type, feature), (site_type, feature, timeline)
        seen.add(pkg.key)
    assert seen == {"frontend", "fullstack", "premium"}


@pytest.mark.parametrize("feature", FEATURES)
def test_ecommerce_always_premium(feature):
    assert recommend(["E-commerce Store", feature, "Flexible"]).key == "premium"


def test_landing_page_with_advanced_feature_is_premium():
    assert recommend(["Landing Page", "Payment Integration", "1-2 weeks"]).key == "premium"


def test_landing_page_with_simple_features_is_frontend():
    pkg = recommend(["Landing Page", "Contact Forms", "1-2 weeks"])
    assert pkg.key == "frontend"
    assert pkg.name == "Frontend Development Pack"
    assert pkg.price == "$499 - $1,999"
    assert pkg.timeline == "1-2 weeks"


def test_unknown_or_empty_answers_fall_back_to_fullstack():
    assert recommend([]).key == "fullstack"
    assert recommend(["Something else entirely"]).key == "fullstack"


def test_answer_order_does_not_matter():
    assert recommend(["Flexible", "Admin Panel", "Blog"]).key == "premium"


def test_returned_package_is_a_copy():
    pkg = recommend(["Blog"])
    pkg.features.append("Free Pony")
    assert "Free Pony" not in PACKAGES["fullstack"].features


def test_questions_endpoint(client):
    r = client.get("/api/recommendations/questions")
    assert r.status_code == 200
    questions = r.json()["data"]["questions"]
    assert [q["id"] for q in questions] == ["start", "features", "timeline"]
    assert len(get_questions()) == 3


def test_recommend_endpoint(client):
    r = client.post("/api/recommendations", json={"answers": ["E-commerce Store", "SEO Optimization", "1-2 months"]})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["package"]["key"] == "premium"
    assert body["data"]["package"]["name"] == "Premium Enterprise Pack"
    assert "Payment Integration" in body["data"]["package"]["features"]


def test_recommend_endpoint_rejects_bad_payload(client):
    r = client.post("/api/recommendations", json={"answers": "Landing Page"})
    assert r.status_code == 400
    assert r.json()["success"] is False
