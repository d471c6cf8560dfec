"""
Health check route.

Public endpoint for load balancers and deployment checks. It does not
touch Gemini or Supabase.
"""

import logging

from fastapi import APIRouter

from travel_recommender.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Mounted at root level in main.py
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Returns:
        HealthResponse: {"status": "ok"}
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
