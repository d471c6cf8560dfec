"""
Database access layer for the Travel Recommender.

The Supabase client is process-scoped: created once in the FastAPI
lifespan and injected through dependencies, never imported as a global.
"""

from .client import close_supabase_client, create_supabase_client

__all__ = ["create_supabase_client", "close_supabase_client"]
