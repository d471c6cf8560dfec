"""
Pytest configuration for the Travel Recommender tests.

Sets up the test environment and global fixtures: an in-memory record
store standing in for Supabase and a mocked Gemini client.
"""
import asyncio
import json
import os
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")

from travel_recommender.schemas.records import RecommendationRecord  # noqa: E402
from travel_recommender.services.record_store import sort_newest_first  # noqa: E402

BASE_TIME = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryRecordStore:
    """
    Stand-in for RecordStore.

    Assigns ids and increasing created_at values on insert and notifies
    open subscriptions, like the Supabase table + Realtime would.
    """

    def __init__(self, records: Optional[List[RecommendationRecord]] = None):
        self.records: List[RecommendationRecord] = list(records or [])
        self.inserted: List[RecommendationRecord] = []
        self.open_subscriptions = 0
        self.subscriptions_opened = 0
        self.fail_writes = False
        self._listeners: List[asyncio.Queue] = []

    async def add_record(self, record: RecommendationRecord) -> RecommendationRecord:
        if self.fail_writes:
            raise RuntimeError("insert failed")
        stored = record.model_copy(update={
            "id": len(self.records) + 1,
            "created_at": BASE_TIME + timedelta(minutes=len(self.records)),
        })
        self.records.append(stored)
        self.inserted.append(stored)
        for queue in self._listeners:
            queue.put_nowait(None)
        return stored

    async def list_records(self) -> List[RecommendationRecord]:
        return sort_newest_first(list(self.records))

    async def subscribe(self):
        queue: asyncio.Queue = asyncio.Queue()
        self._listeners.append(queue)
        self.open_subscriptions += 1
        self.subscriptions_opened += 1
        try:
            yield await self.list_records()
            while True:
                await queue.get()
                yield await self.list_records()
        finally:
            self._listeners.remove(queue)
            self.open_subscriptions -= 1


def make_record(
    city: str = "lisbon",
    country: str = "portugal",
    minutes: Optional[int] = 0,
    record_id: Any = None,
    **overrides: Any,
) -> RecommendationRecord:
    """Build a stored record; minutes=None leaves created_at unresolved."""
    data: Dict[str, Any] = {
        "id": record_id,
        "username": "Ana",
        "age": "29",
        "style": "relaxed",
        "activity": "hiking",
        "city": city,
        "country": country,
        "recommendation": "Walk the hills. Eat well.",
        "created_at": None if minutes is None else BASE_TIME + timedelta(minutes=minutes),
    }
    data.update(overrides)
    return RecommendationRecord(**data)


def gemini_response(payload: Any = None, text: Optional[str] = None) -> SimpleNamespace:
    """
    Fake GenerateContentResponse with one candidate and one text part.

    Pass a dict to have it JSON-encoded, or raw text.
    """
    if text is None:
        text = json.dumps(payload)
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def valid_preferences() -> Dict[str, str]:
    return {"username": "Ana", "age": "29", "style": "Relaxed", "activity": "Hiking"}


@pytest.fixture
def lisbon_payload() -> Dict[str, str]:
    return {
        "city": "Lisbon",
        "country": "Portugal",
        "recommendation": "Hike the Sintra trails. Relax by the Tagus at sunset.",
    }


@pytest.fixture
def mock_gemini():
    """
    Patch the Gemini client factory.

    Yields the AsyncMock standing in for client.aio.models.generate_content.
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    with patch(
        "travel_recommender.services.recommendation_service._get_gemini_client",
        return_value=client,
    ):
        yield client.aio.models.generate_content


@pytest.fixture
def record_factory():
    """Factory fixture for RecommendationRecord (see make_record)."""
    return make_record


@pytest.fixture
def gemini_response_factory():
    """Factory fixture for fake Gemini responses (see gemini_response)."""
    return gemini_response


@pytest.fixture
def store_factory():
    """Factory fixture for InMemoryRecordStore seeded with records."""
    return InMemoryRecordStore
