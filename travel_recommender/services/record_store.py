"""
Recommendation record persistence on Supabase.

RULES:
1. Records are append-only: this module inserts and reads, never updates
   or deletes.
2. id and created_at are assigned by the database
   (created_at timestamptz default now()).
3. Reads are always ordered by created_at descending.
4. Live queries use Supabase Realtime postgres changes on the table; every
   change triggers a full re-read so subscribers always get the complete
   ordered list.
"""

import asyncio
import logging
from typing import Any, AsyncGenerator, Dict, List, cast
from uuid import uuid4

import anyio
from supabase import AsyncClient

from travel_recommender.config import settings
from travel_recommender.schemas.records import RecommendationRecord

logger = logging.getLogger(__name__)


def sort_newest_first(records: List[RecommendationRecord]) -> List[RecommendationRecord]:
    """
    Order records by created_at descending.

    Records without a timestamp yet are the ones still being written, so
    they sort ahead of everything else.
    """
    resolved = [r for r in records if r.created_at is not None]
    pending = [r for r in records if r.created_at is None]
    resolved.sort(key=lambda r: r.created_at, reverse=True)  # type: ignore[arg-type, return-value]
    return pending + resolved


class RecordStore:
    """
    Access to the recommendations table through one process-scoped
    Supabase client.

    The client is created once at startup (see db/client.py) and handed in
    explicitly; this class never builds its own.
    """

    def __init__(self, supabase_client: AsyncClient, table: str = settings.RECOMMENDATIONS_TABLE):
        self._client = supabase_client
        self._table = table

    @property
    def table(self) -> str:
        return self._table

    async def add_record(self, record: RecommendationRecord) -> RecommendationRecord:
        """
        Append a record to the table.

        Args:
            record: Record built from a successful submission

        Returns:
            The stored record, with id and created_at when the database
            echoed the row back.
        """
        logger.debug(f"Inserting recommendation for username='{record.username}'")

        result = await self._client.table(self._table).insert(record.to_insert_row()).execute()

        rows = cast(List[Dict[str, Any]], result.data or [])
        if not rows:
            logger.warning("Insert returned no representation, keeping local record")
            return record

        stored = RecommendationRecord.model_validate(rows[0])
        logger.info(f"Stored recommendation id={stored.id} ({stored.city}, {stored.country})")
        return stored

    async def list_records(self) -> List[RecommendationRecord]:
        """
        Fetch every stored record, newest first.
        """
        result = await (
            self._client.table(self._table)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )

        rows = cast(List[Dict[str, Any]], result.data or [])
        records = [RecommendationRecord.model_validate(row) for row in rows]

        logger.debug(f"Fetched {len(records)} recommendation records")
        return sort_newest_first(records)

    async def subscribe(self) -> AsyncGenerator[List[RecommendationRecord], None]:
        """
        Live query over the whole table.

        Yields the full ordered list once right away and again after every
        insert/update/delete on the table. The realtime channel is opened
        when iteration starts and removed when the iterator is closed.
        """
        changes: asyncio.Queue = asyncio.Queue()

        def _on_change(payload: Dict[str, Any]) -> None:
            logger.debug(f"Realtime change on {self._table}: {payload.get('eventType', payload.get('type'))}")
            changes.put_nowait(payload)

        channel = self._client.channel(f"{self._table}-timeline-{uuid4().hex[:8]}")
        channel.on_postgres_changes(
            "*",
            schema="public",
            table=self._table,
            callback=_on_change,
        )
        await channel.subscribe()
        logger.info(f"Realtime subscription opened on {self._table}")

        try:
            yield await self.list_records()

            while True:
                await changes.get()
                # Collapse bursts of events into one re-read
                while not changes.empty():
                    changes.get_nowait()
                yield await self.list_records()
        finally:
            # Runs while the consumer is being cancelled
            with anyio.CancelScope(shield=True):
                await self._client.remove_channel(channel)
            logger.info(f"Realtime subscription closed on {self._table}")
