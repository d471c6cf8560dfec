"""
Timeline of stored recommendations.

TimelineView owns one live query on the store for its whole lifetime and
turns each delivered list into display-ready TimelineEntry objects.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import AsyncGenerator, List, Optional

from travel_recommender.schemas.records import RecommendationRecord
from travel_recommender.services.record_store import RecordStore, sort_newest_first
from travel_recommender.utils.formatting import capitalize, format_timestamp

logger = logging.getLogger(__name__)

EMPTY_TIMELINE_MESSAGE = "No recommendations yet."


@dataclass(frozen=True)
class TimelineEntry:
    """One rendered line of the timeline."""
    key: str
    timestamp: str
    username: str
    city: str
    country: str
    age: str
    style: str
    activity: str
    recommendation: str


def build_entries(
    records: List[RecommendationRecord],
    now: Optional[datetime] = None,
) -> List[TimelineEntry]:
    """
    Order records newest first and format them for display.

    City, country, style and activity are capitalized; username, age and
    the recommendation text are shown as stored.
    """
    entries = []
    for index, record in enumerate(sort_newest_first(records)):
        entries.append(TimelineEntry(
            key=str(record.id) if record.id is not None else f"pending-{index}",
            timestamp=format_timestamp(record.created_at, now=now),
            username=record.username,
            city=capitalize(record.city),
            country=capitalize(record.country),
            age=record.age,
            style=capitalize(record.style),
            activity=capitalize(record.activity),
            recommendation=record.recommendation,
        ))
    return entries


class TimelineView:
    """
    Live timeline bound to one store subscription.

    A view may be subscribed once; the subscription is released when the
    iteration ends, however it ends.
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._acquired = False
        self.records: List[RecommendationRecord] = []

    @property
    def entries(self) -> List[TimelineEntry]:
        return build_entries(self.records)

    async def subscribe(self) -> AsyncGenerator[List[RecommendationRecord], None]:
        """
        Yield the full ordered record list on open and after every change.

        Raises:
            RuntimeError: If this view was already subscribed
        """
        if self._acquired:
            raise RuntimeError("TimelineView is already subscribed")
        self._acquired = True

        updates = self._store.subscribe()
        try:
            async for records in updates:
                self.records = sort_newest_first(records)
                logger.debug(f"Timeline updated with {len(self.records)} records")
                yield self.records
        finally:
            await updates.aclose()
