"""
FastAPI route listing stored recommendations.

A one-shot read of the same query the live timeline runs, for clients
that cannot keep a WebSocket open.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from travel_recommender.routes.dependencies import get_record_store
from travel_recommender.schemas.records import RecommendationRecord
from travel_recommender.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


@router.get(
    "/recommendations",
    response_model=List[RecommendationRecord],
    summary="List stored recommendations",
    description="Every stored recommendation, ordered by created_at descending.",
)
async def list_recommendations_endpoint(
    store: RecordStore = Depends(get_record_store),
) -> List[RecommendationRecord]:
    """List all records, newest first."""
    records = await store.list_records()
    logger.info(f"GET /api/recommendations returning {len(records)} records")
    return records
