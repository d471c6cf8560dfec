"""
Destination Recommendation Prompt Templates

Contains the user prompt builder and the strict response schema for the
destination call.

The output structure is enforced by the generation config
(response_mime_type="application/json" + response_schema), so the prompt
only describes the task.
"""

from typing import Tuple

from google.genai import types

# Checked in this order when validating the model output; the first
# missing field is the one reported.
REQUIRED_RESPONSE_FIELDS: Tuple[str, ...] = ("city", "country", "recommendation")


# =============================================================================
# RESPONSE SCHEMA
# =============================================================================

RECOMMENDATION_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "city": types.Schema(
            type=types.Type.STRING,
            description="The name of the recommended travel destination city.",
        ),
        "country": types.Schema(
            type=types.Type.STRING,
            description="The name of the recommended travel country.",
        ),
        "recommendation": types.Schema(
            type=types.Type.STRING,
            description="Explanation of what they can do based on the activity.",
        ),
    },
    required=list(REQUIRED_RESPONSE_FIELDS),
)


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_recommendation_prompt(
    username: str,
    age: str,
    style: str,
    activity: str,
) -> str:
    """
    Build the prompt for the destination recommendation.

    Args:
        username: Traveller's display name
        age: Traveller's age as free text
        style: Travel style (e.g. "Relaxed")
        activity: Favourite activity (e.g. "Hiking")

    Returns:
        str: Prompt ready to be sent to Gemini
    """
    return f"""Recommend exactly one travel destination city for user {username}.
The city should align with the following preferences:
- Age: {age}
- Travel Style: {style}
- Favourite Activity: {activity}

Respond with a JSON object containing the recommended city name, country and two sentences explaining what they can do in that city based on their favourite activity and travel style and age.
The JSON object must have exactly three string fields: city, country, recommendation."""
