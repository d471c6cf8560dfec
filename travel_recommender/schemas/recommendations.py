"""
Pydantic schemas for POST /api/recommend.

The endpoint either returns all three result fields or an error body;
there is no partial result.
"""

from pydantic import BaseModel, Field


class RecommendationResult(BaseModel):
    """
    Structured destination returned by the endpoint.

    Mirrors the response schema Gemini is asked to fill in
    (see travel_recommender.agents.recommendation.prompts).
    """
    city: str = Field(
        ...,
        min_length=1,
        description="Recommended destination city",
        examples=["Lisbon"]
    )
    country: str = Field(
        ...,
        min_length=1,
        description="Country of the recommended city",
        examples=["Portugal"]
    )
    recommendation: str = Field(
        ...,
        min_length=1,
        description="Two sentences on what the traveller can do there",
        examples=[
            "Walk the Alfama hills and the coastal trails of Sintra. "
            "Finish the day with a slow dinner overlooking the Tagus."
        ]
    )


class ErrorResponse(BaseModel):
    """Error body for 400/500 responses."""
    error: str = Field(
        ...,
        description="Human readable error message",
        examples=["missing fields", "Gemini API request failed"]
    )
