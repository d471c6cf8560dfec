"""
Pydantic schema for the travel preference form.

Minimum lengths are enforced before anything leaves the form; the
endpoint only re-checks that each field is present.
"""

from pydantic import BaseModel, Field


class PreferenceInput(BaseModel):
    """Travel preferences collected on the form."""

    username: str = Field(
        ...,
        min_length=2,
        description="Display name of the traveller",
        examples=["Ana"]
    )
    age: str = Field(
        ...,
        min_length=1,
        description="Age as typed by the user (free text, not a number)",
        examples=["29"]
    )
    style: str = Field(
        ...,
        min_length=3,
        description="Travel style",
        examples=["Relaxed", "Backpacking"]
    )
    activity: str = Field(
        ...,
        min_length=3,
        description="Favourite activity",
        examples=["Hiking", "Museums"]
    )
