"""
Destination Recommendation - Structured Generation

Prompt template and response schema for the Gemini destination call.

Architecture:
- Pattern: single API call, no tools
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Output: JSON forced by response_mime_type + response_schema
"""

from travel_recommender.agents.recommendation.prompts import (
    RECOMMENDATION_RESPONSE_SCHEMA,
    REQUIRED_RESPONSE_FIELDS,
    build_recommendation_prompt,
)

__all__ = [
    "RECOMMENDATION_RESPONSE_SCHEMA",
    "REQUIRED_RESPONSE_FIELDS",
    "build_recommendation_prompt",
]
