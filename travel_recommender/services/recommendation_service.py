"""
Recommendation Service - Gemini Structured Generation

Asks Gemini for exactly one travel destination and validates what comes back.

Architecture:
- Pattern: single structured-generation call (no tools)
- Model: settings.GEMINI_MODEL (default gemini-2.5-flash)
- API: Google Gen AI Python SDK (google-genai), async client
- Output: JSON forced by response_mime_type + response_schema

Structured generation guarantees syntactically valid JSON, not sensible
content, so every field is still checked. Each failure raises
RecommendationServiceError carrying the message the caller is allowed to
see; upstream details are only logged.
"""

import json
import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors, types

from travel_recommender.agents.recommendation.prompts import (
    RECOMMENDATION_RESPONSE_SCHEMA,
    REQUIRED_RESPONSE_FIELDS,
    build_recommendation_prompt,
)
from travel_recommender.config import settings
from travel_recommender.schemas.recommendations import RecommendationResult

logger = logging.getLogger(__name__)


class RecommendationServiceError(Exception):
    """Terminal failure of a recommendation request (HTTP 500)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _get_gemini_client(api_key: str) -> genai.Client:
    """Create a Gemini client for one request."""
    return genai.Client(api_key=api_key)


def _extract_response_text(response: types.GenerateContentResponse) -> Optional[str]:
    """
    Return the text of the first part of the first candidate, or None.
    """
    if not response.candidates:
        return None

    content = response.candidates[0].content
    if content is None or not content.parts:
        return None

    return content.parts[0].text or None


def _parse_response_text(raw_text: str) -> Dict[str, Any]:
    """
    Parse the model output as a JSON object.

    Raises:
        RecommendationServiceError: If the text is not a JSON object
    """
    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response from LLM: {raw_text!r} ({e})")
        raise RecommendationServiceError("Invalid JSON format from AI")

    if not isinstance(parsed, dict):
        logger.error(f"LLM response is valid JSON but not an object: {raw_text!r}")
        raise RecommendationServiceError("Invalid JSON format from AI")

    return parsed


def _validate_response_fields(parsed: Dict[str, Any]) -> RecommendationResult:
    """
    Check city, country and recommendation in that order.

    Raises:
        RecommendationServiceError: Naming the first missing or empty field,
            or the first field that is not a string
    """
    for field in REQUIRED_RESPONSE_FIELDS:
        value = parsed.get(field)
        if not value:
            logger.error(f"LLM response missing '{field}' field")
            raise RecommendationServiceError(f"AI response missing '{field}' field")
        if not isinstance(value, str):
            logger.error(f"LLM response field '{field}' is not a string: {value!r}")
            raise RecommendationServiceError(f"AI response '{field}' field is not a string")

    return RecommendationResult(
        city=parsed["city"],
        country=parsed["country"],
        recommendation=parsed["recommendation"],
    )


async def generate_recommendation(
    api_key: str,
    username: str,
    age: str,
    style: str,
    activity: str,
) -> RecommendationResult:
    """
    Get one structured destination recommendation from Gemini.

    This function:
    1. Builds the prompt from the four preference fields
    2. Calls Gemini with the strict three-field response schema
    3. Extracts the text of the first candidate's first part
    4. Parses it as JSON and checks every required field

    Args:
        api_key: Gemini API key (checked by the caller)
        username: Traveller's display name
        age: Traveller's age as free text
        style: Travel style
        activity: Favourite activity

    Returns:
        RecommendationResult with non-empty city, country and recommendation

    Raises:
        RecommendationServiceError: For upstream errors and malformed output.
            Network failures and other unexpected exceptions propagate.
    """
    logger.info(f"generate_recommendation called for username='{username}'")

    prompt = build_recommendation_prompt(
        username=username,
        age=age,
        style=style,
        activity=activity,
    )

    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=RECOMMENDATION_RESPONSE_SCHEMA,
    )

    client = _get_gemini_client(api_key)

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=prompt,
            config=config,
        )
    except errors.APIError as e:
        logger.error(f"Gemini API error status: {e.code} detail: {e.message} {e.details}")
        raise RecommendationServiceError("Gemini API request failed")

    raw_text = _extract_response_text(response)
    if not raw_text:
        logger.error(f"Gemini API response missing structured text content: {response}")
        raise RecommendationServiceError("Could not get structured recommendation from AI")

    parsed = _parse_response_text(raw_text)
    result = _validate_response_fields(parsed)

    logger.info(f"Recommended {result.city}, {result.country} for username='{username}'")
    return result
