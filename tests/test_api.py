"""
Tests for the FastAPI endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from engine.api import app


@pytest.fixture
def client():
    return TestClient(app)


PREMIUM = {"rating": 4.3, "reviewCount": 1247, "title": "iPhone 15 - Premium Quality"}


class TestSearchEndpoints:
    """Test product search over HTTP."""

    def test_post_search(self, client):
        """Test search returns scored mock products."""
        response = client.post("/api/search", json={"query": "Headphones"})
        assert response.status_code == 200

        data = response.json()
        assert data["query"] == "Headphones"
        assert data["total_count"] == 3
        assert [p["trust_score"] for p in data["products"]] == [85, 76, 90]
        assert data["products"][1]["trust_label"] == "Medium Trust"
        assert data["products"][0]["product"]["reviewCount"] == 1247
        assert data["products"][0]["breakdown"]["overall"] == 85
        assert data["query_id"]

    def test_get_search(self, client):
        """Test query string search."""
        response = client.get("/api/search", params={"q": "Blender"})
        assert response.status_code == 200
        assert response.json()["products"][2]["product"]["title"] == "Professional Blender Kit"

    def test_empty_query_rejected(self, client):
        """Test empty queries fail validation."""
        assert client.post("/api/search", json={"query": ""}).status_code == 422
        assert client.get("/api/search", params={"q": ""}).status_code == 422

    def test_blank_query_returns_no_products(self, client):
        """Test whitespace-only query is an empty result, not an error."""
        response = client.post("/api/search", json={"query": "   "})
        assert response.status_code == 200
        assert response.json()["total_count"] == 0


class TestTrustScoreEndpoints:
    """Test scoring over HTTP."""

    def test_detailed_score(self, client):
        """Test full breakdown."""
        response = client.post("/api/trust-score", json=PREMIUM)
        assert response.status_code == 200

        data = response.json()
        assert data["overall"] == 85
        assert data["volume"] == 95
        assert data["authenticity"] == 85
        assert data["sentiment"] == 75
        assert data["rating"] == pytest.approx(84)
        assert data["factors"] == [
            "High customer satisfaction",
            "Large number of reviews",
            "Reviews appear authentic",
        ]

    def test_snake_case_body(self, client):
        """Test review_count is accepted as well as reviewCount."""
        body = {"rating": 3.8, "review_count": 892, "title": "Best X for Budget"}
        assert client.post("/api/trust-score", json=body).json()["overall"] == 76

    def test_simple_score(self, client):
        """Test overall score and label only."""
        response = client.post("/api/trust-score/simple", json=PREMIUM)
        assert response.status_code == 200
        assert response.json() == {"trust_score": 85, "trust_label": "High Trust"}

    def test_out_of_range_values_not_rejected(self, client):
        """Test malformed numbers are scored and clamped, not rejected."""
        response = client.post("/api/trust-score", json={"rating": -30, "reviewCount": -7})
        assert response.status_code == 200
        assert response.json()["overall"] == 0

    @pytest.mark.parametrize("raw_rating,expected", [
        ("1e400", 100),
        ("-1e400", 0),
        ("NaN", 0),
        ("Infinity", 100),
    ])
    def test_non_finite_rating_clamped(self, client, raw_rating, expected):
        """Test ratings that parse to inf or NaN still score within 0-100."""
        body = '{"rating": ' + raw_rating + ', "reviewCount": 5}'
        response = client.post(
            "/api/trust-score",
            content=body,
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["overall"] == expected
        assert data["rating"] is None
        assert data["volume"] == 35

    def test_non_finite_rating_simple_score(self, client):
        """Test the overall-only endpoint clamps an infinite rating."""
        response = client.post(
            "/api/trust-score/simple",
            content='{"rating": 1e400, "reviewCount": 5}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 200
        assert response.json() == {"trust_score": 100, "trust_label": "High Trust"}

    def test_non_numeric_rating_rejected(self, client):
        """Test body type validation."""
        body = {"rating": "excellent", "reviewCount": 10, "title": "Lamp"}
        assert client.post("/api/trust-score", json=body).status_code == 422

    def test_missing_rating_rejected(self, client):
        """Test required fields."""
        assert client.post("/api/trust-score", json={"reviewCount": 10}).status_code == 422


class TestReviewEndpoints:
    """Test review analysis placeholders over HTTP."""

    def test_sentiment(self, client):
        """Test keyword sentiment."""
        response = client.post("/api/reviews/sentiment", json={"text": "Excellent, love it"})
        assert response.status_code == 200
        assert response.json()["sentiment"] == pytest.approx(0.9)

    def test_authenticity(self, client):
        """Test fixed authenticity estimate."""
        body = {"reviews": [{"text": "ok", "rating": 3.0}]}
        response = client.post("/api/reviews/authenticity", json=body)
        assert response.status_code == 200
        assert response.json() == {"authenticity": 0.85}


class TestSystemEndpoints:
    """Test events, reset and status."""

    def test_events_after_search(self, client):
        """Test search activity shows up in the event feed."""
        client.post("/api/search", json={"query": "Kettle"})

        events = client.get("/api/events").json()["events"]
        assert len(events) == 4
        assert {e["category"] for e in events} == {"Search", "Scoring"}

    def test_events_level_filter(self, client):
        """Test filtering by level."""
        client.post("/api/search", json={"query": "Kettle"})
        response = client.get("/api/events", params={"level": "Warning"})
        assert response.status_code == 200
        assert response.json()["events"] == []

    def test_events_unknown_level(self, client):
        """Test invalid level is rejected."""
        assert client.get("/api/events", params={"level": "Loud"}).status_code == 422

    def test_reset_clears_events(self, client, isolated_event_log):
        """Test reset leaves only the reset event."""
        client.post("/api/search", json={"query": "Kettle"})
        response = client.post("/api/demo/reset")
        assert response.status_code == 200
        assert response.json()["status"] == "reset"

        events = isolated_event_log.read_events()
        assert [e.event_id for e in events] == [4004]

    def test_status(self, client):
        """Test health check."""
        data = client.get("/api/status").json()
        assert data["status"] == "healthy"
        assert data["product_source"] == "mock"
        assert data["event_count"] == 0

    def test_root(self, client):
        """Test banner."""
        assert client.get("/").json()["status"] == "Recensor API running"
