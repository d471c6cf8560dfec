"""
FastAPI application entry point for the Travel Recommender.

This module creates the FastAPI app instance, owns the process-scoped
clients (Supabase, httpx) through the lifespan and registers all routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_recommender.config import settings
from travel_recommender.db.client import close_supabase_client, create_supabase_client
from travel_recommender.routes.health import router as health_router
from travel_recommender.routes.recommend import router as recommend_router
from travel_recommender.routes.records import router as records_router
from travel_recommender.routes.views import router as views_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: CORS_ALLOWED_ORIGINS (none if unset)
    - anything else: all origins, for local development

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Create the process-wide Supabase and httpx clients once and close them
    on shutdown.

    A missing Supabase configuration does not stop the app: the
    recommendation endpoint keeps working and the store-backed routes
    answer 503.
    """
    app.state.http_client = httpx.AsyncClient(timeout=settings.RECOMMEND_API_TIMEOUT)

    try:
        app.state.supabase = await create_supabase_client()
    except ValueError as e:
        logger.warning(f"Recommendations store disabled: {e}")
        app.state.supabase = None

    try:
        yield
    finally:
        if app.state.supabase is not None:
            await close_supabase_client(app.state.supabase)
        await app.state.http_client.aclose()
        logger.info("Shut down process-scoped clients")


# Create FastAPI app
app = FastAPI(
    title="Travel Recommender API",
    description="Gemini-powered travel destination recommendations with a live timeline",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(recommend_router)
app.include_router(records_router)
app.include_router(views_router)

logger.info("FastAPI app initialized successfully")
