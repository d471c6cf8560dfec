"""
FastAPI route for the destination recommendation endpoint.

POST /api/recommend takes the four preference fields and returns exactly
{city, country, recommendation}, or {"error": ...} with 400/500.

Endpoint flow:
- Step 1: Configuration gate (GEMINI_API_KEY), before anything else
- Step 2: Parse body (raw JSON, so a missing field is a 400, not a 422)
- Step 3: Presence check on username/age/style/activity
- Step 4: Call Gemini via the service layer
- Step 5: Map service errors to 500 {"error": ...}
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from travel_recommender.config import settings
from travel_recommender.schemas.recommendations import ErrorResponse, RecommendationResult
from travel_recommender.services.recommendation_service import (
    RecommendationServiceError,
    generate_recommendation,
)

logger = logging.getLogger(__name__)

REQUIRED_INPUT_FIELDS = ("username", "age", "style", "activity")

router = APIRouter(
    prefix="/api",
    tags=["recommendations"]
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/recommend",
    response_model=RecommendationResult,
    status_code=200,
    summary="Recommend one travel destination",
    responses={
        400: {"model": ErrorResponse, "description": "Missing input fields"},
        500: {"model": ErrorResponse, "description": "Configuration, upstream or parsing failure"},
    },
    description="""
    Asks Gemini for exactly one destination matching the traveller's
    preferences.

    **Request body:** `{username, age, style, activity}`, all non-empty strings.

    **Errors:** always `{"error": "..."}`.
    - 400: a field is missing or empty
    - 500: GEMINI_API_KEY not set, Gemini request failed, output missing,
      not valid JSON, or missing city/country/recommendation
    """
)
async def recommend_endpoint(request: Request):
    """
    Destination recommendation endpoint.

    Every exception is turned into a JSON error response; no partial
    result is ever returned.
    """
    try:
        api_key = settings.GEMINI_API_KEY
        if not api_key:
            logger.error("GEMINI_API_KEY not configured")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "GEMINI_API_KEY environment variable not set"
            )

        body = await request.json()

        if not isinstance(body, dict) or not all(body.get(field) for field in REQUIRED_INPUT_FIELDS):
            logger.info("POST /api/recommend rejected: missing fields")
            return _error(status.HTTP_400_BAD_REQUEST, "missing fields")

        logger.info(f"POST /api/recommend called for username='{body['username']}'")

        result = await generate_recommendation(
            api_key=api_key,
            username=str(body["username"]),
            age=str(body["age"]),
            style=str(body["style"]),
            activity=str(body["activity"]),
        )

        return result

    except RecommendationServiceError as e:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)

    except Exception as e:
        logger.exception(f"Server processing error: {e}")
        # request.json() raises JSONDecodeError / UnicodeDecodeError, both ValueError
        if isinstance(e, ValueError):
            logger.error("Possible cause: Request body parsing error (e.g., invalid JSON in POST body)")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server processing error")
