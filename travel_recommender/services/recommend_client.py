"""
HTTP client used by the preference form to reach POST /api/recommend.

The form talks to the endpoint over HTTP like any other client would, so
the endpoint stays the single authority on what a valid result is. This
client still defaults each result field to "Unknown" when it is absent
instead of trusting that contract blindly.
"""

import logging
from typing import Any, Optional

import httpx

from travel_recommender.config import settings
from travel_recommender.schemas.preferences import PreferenceInput
from travel_recommender.schemas.recommendations import RecommendationResult

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class RecommendationRequestError(Exception):
    """The endpoint call failed; ``message`` is shown to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RecommendationApiClient:
    """
    Thin async wrapper around the recommendation endpoint.

    Args:
        http_client: The process-wide httpx.AsyncClient from the app
            lifespan, which also owns its timeout and closing
        url: Full URL of POST /api/recommend
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str = settings.RECOMMEND_API_URL,
    ):
        self.url = url
        self._http = http_client

    async def fetch_recommendation(self, preferences: PreferenceInput) -> RecommendationResult:
        """
        POST the preferences and return the destination.

        Raises:
            RecommendationRequestError: On transport errors, non-2xx
                responses, non-JSON bodies or a body carrying "error".
        """
        logger.info(f"POST {self.url} for username='{preferences.username}'")

        try:
            response = await self._http.post(self.url, json=preferences.model_dump())
        except httpx.HTTPError as e:
            logger.error(f"Could not reach recommendation endpoint: {e}")
            raise RecommendationRequestError("Recommendation failed: endpoint unreachable")

        try:
            body: Any = response.json()
        except ValueError:
            logger.error(f"Non-JSON response ({response.status_code}): {response.text[:200]}")
            raise RecommendationRequestError(
                "Recommendation failed: unknown",
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            body = {}

        if not response.is_success or body.get("error"):
            error = body.get("error") or "unknown"
            logger.warning(f"Recommendation failed ({response.status_code}): {error}")
            raise RecommendationRequestError(
                f"Recommendation failed: {error}",
                status_code=response.status_code,
            )

        return RecommendationResult(
            city=body.get("city") or UNKNOWN,
            country=body.get("country") or UNKNOWN,
            recommendation=body.get("recommendation") or UNKNOWN,
        )
