"""
Tests for the browser-facing routes: GET /, POST / and /ws/timeline.

The record store is replaced by the in-memory store through
app.dependency_overrides. The form reaches POST /api/recommend through
the real app (httpx.ASGITransport) with Gemini mocked.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from travel_recommender.main import app
from travel_recommender.routes.dependencies import (
    get_recommend_client,
    get_record_store,
    get_timeline_store,
)
from travel_recommender.services.recommend_client import RecommendationApiClient


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_store(record_store):
    """Route every store dependency to the in-memory store."""
    app.dependency_overrides[get_record_store] = lambda: record_store
    app.dependency_overrides[get_timeline_store] = lambda: record_store

    def _in_process_client() -> RecommendationApiClient:
        return RecommendationApiClient(
            url="http://testserver/api/recommend",
            http_client=httpx.AsyncClient(
                transport=httpx.ASGITransport(app=app),
                base_url="http://testserver",
            ),
        )

    app.dependency_overrides[get_recommend_client] = _in_process_client

    yield record_store

    app.dependency_overrides.clear()


class TestIndex:
    """Tests for GET /."""

    def test_empty_timeline_placeholder(self, client, override_store):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "No recommendations yet." in response.text
        assert 'name="username"' in response.text

    def test_records_rendered_newest_first(self, client, override_store, record_factory):
        override_store.records.extend([
            record_factory(city="lisbon", minutes=0, record_id=1),
            record_factory(city="faro", minutes=10, record_id=3),
            record_factory(city="porto", minutes=5, record_id=2),
        ])

        response = client.get("/")

        text = response.text
        assert "No recommendations yet." not in text
        assert text.index("Faro") < text.index("Porto") < text.index("Lisbon")

    def test_store_not_configured_is_503(self, client):
        response = client.get("/")

        assert response.status_code == 503


class TestSubmitPreferences:
    """Tests for POST / (full round trip through /api/recommend)."""

    def test_successful_submission_stores_and_resets(
        self, client, override_store, mock_gemini, gemini_response_factory, lisbon_payload, valid_preferences
    ):
        mock_gemini.return_value = gemini_response_factory(lisbon_payload)

        response = client.post("/", data=valid_preferences)

        assert response.status_code == 200
        assert len(override_store.inserted) == 1
        stored = override_store.inserted[0]
        assert (stored.username, stored.age, stored.style, stored.activity) == ("Ana", "29", "Relaxed", "Hiking")
        assert (stored.city, stored.country) == ("Lisbon", "Portugal")
        assert stored.created_at is not None

        assert 'value="Ana"' not in response.text
        assert "Lisbon, Portugal" in response.text
        assert "alert(" not in response.text

    def test_invalid_submission_shows_errors_without_calling_endpoint(
        self, client, override_store, mock_gemini, valid_preferences
    ):
        response = client.post("/", data={**valid_preferences, "style": "ab"})

        assert response.status_code == 200
        assert 'class="error"' in response.text
        assert 'value="ab"' in response.text
        mock_gemini.assert_not_called()
        assert override_store.inserted == []

    def test_endpoint_failure_alerts(
        self, client, override_store, mock_gemini, gemini_response_factory, valid_preferences
    ):
        mock_gemini.return_value = gemini_response_factory(text="not json")

        response = client.post("/", data=valid_preferences)

        assert response.status_code == 200
        assert 'alert("Recommendation failed: Invalid JSON format from AI");' in response.text
        assert override_store.inserted == []
        assert 'value="Ana"' in response.text


class TestTimelineSocket:
    """Tests for /ws/timeline."""

    def test_pushes_rendered_timeline_on_connect(self, client, override_store, record_factory):
        override_store.records.append(record_factory(city="lisbon", record_id=1))

        with client.websocket_connect("/ws/timeline") as websocket:
            items = websocket.receive_text()

        assert "Lisbon, Portugal" in items
        assert items.lstrip().startswith("<li")

    def test_pushes_placeholder_for_empty_store(self, client, override_store):
        with client.websocket_connect("/ws/timeline") as websocket:
            items = websocket.receive_text()

        assert "No recommendations yet." in items

    def test_repeated_connections_each_release_their_subscription(self, client, override_store, record_factory):
        override_store.records.append(record_factory(city="lisbon", record_id=1))

        for _ in range(10):
            with client.websocket_connect("/ws/timeline") as websocket:
                assert "Lisbon, Portugal" in websocket.receive_text()

        assert override_store.subscriptions_opened == 10
        assert override_store.open_subscriptions == 0
