"""
FastAPI dependencies for process-scoped handles.

The Supabase client and the shared httpx client are created once in the
app lifespan and live on app.state; these dependencies hand them to the
routes. Tests override them with app.dependency_overrides.
"""

import logging

import httpx
from fastapi import HTTPException, Request, WebSocket, WebSocketException, status

from travel_recommender.services.recommend_client import RecommendationApiClient
from travel_recommender.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def get_record_store(request: Request) -> RecordStore:
    """
    Record store bound to the process-wide Supabase client.

    Raises:
        HTTPException 503: If the store was not configured at startup
    """
    supabase_client = getattr(request.app.state, "supabase", None)
    if supabase_client is None:
        logger.error("Recommendations store requested but Supabase is not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "store_unavailable", "details": "Supabase is not configured"},
        )
    return RecordStore(supabase_client)


def get_timeline_store(websocket: WebSocket) -> RecordStore:
    """Same as get_record_store, for the /ws/timeline socket."""
    supabase_client = getattr(websocket.app.state, "supabase", None)
    if supabase_client is None:
        logger.error("Timeline socket opened but Supabase is not configured")
        raise WebSocketException(
            code=status.WS_1011_INTERNAL_ERROR,
            reason="Supabase is not configured",
        )
    return RecordStore(supabase_client)


def get_recommend_client(request: Request) -> RecommendationApiClient:
    """Client the form uses to call POST /api/recommend."""
    http_client: httpx.AsyncClient = request.app.state.http_client
    return RecommendationApiClient(http_client=http_client)
