"""
Supabase client factory.

One async client is created per process at startup (see main.lifespan)
and stored on app.state. Routes reach it through
travel_recommender.routes.dependencies.get_record_store.

The async client is required because Realtime (live queries on the
recommendations table) is only available on supabase.AsyncClient.
"""

import logging

from supabase import AsyncClient, acreate_client

from travel_recommender.config import settings

logger = logging.getLogger(__name__)


async def create_supabase_client() -> AsyncClient:
    """
    Create the process-wide Supabase client.

    Uses SUPABASE_PUBLISHABLE_KEY; the recommendations table is expected
    to allow anonymous insert/select through its RLS policies.

    Returns:
        An async Supabase client.

    Raises:
        ValueError: If SUPABASE_URL or SUPABASE_PUBLISHABLE_KEY is missing.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_PUBLISHABLE_KEY:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_PUBLISHABLE_KEY must be set to use the "
            "recommendations store."
        )

    client = await acreate_client(
        supabase_url=settings.SUPABASE_URL,
        supabase_key=settings.SUPABASE_PUBLISHABLE_KEY,
    )

    logger.info("Created Supabase client for the recommendations store")
    return client


async def close_supabase_client(client: AsyncClient) -> None:
    """Drop every realtime channel still open on the client."""
    await client.remove_all_channels()
    logger.info("Closed Supabase realtime channels")
