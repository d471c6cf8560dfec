"""
Service layer for the Travel Recommender.

- recommendation_service: the Gemini destination call and output validation
- record_store: persistence and live queries on the recommendations table
- recommend_client: HTTP client the preference form uses to reach
  POST /api/recommend
"""

from .recommendation_service import RecommendationServiceError, generate_recommendation
from .record_store import RecordStore

__all__ = [
    "RecommendationServiceError",
    "generate_recommendation",
    "RecordStore",
]
