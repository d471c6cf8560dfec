"""
Pydantic schema for rows of the recommendations table.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from travel_recommender.schemas.preferences import PreferenceInput
from travel_recommender.schemas.recommendations import RecommendationResult


class RecommendationRecord(BaseModel):
    """
    One stored recommendation: the preferences that were submitted plus
    the destination the endpoint returned.

    ``id`` and ``created_at`` are assigned by the store and are None on a
    record that has not been written yet.
    """
    id: Optional[Union[int, str]] = Field(None, description="Store-assigned identifier")
    username: str
    age: str
    style: str
    activity: str
    city: str
    country: str
    recommendation: str
    created_at: Optional[datetime] = Field(
        None,
        description="Store-assigned creation time (timestamptz default now())"
    )

    @classmethod
    def from_submission(
        cls,
        preferences: PreferenceInput,
        result: RecommendationResult,
    ) -> "RecommendationRecord":
        """Merge the submitted form and the endpoint result into a new record."""
        return cls(**preferences.model_dump(), **result.model_dump())

    def to_insert_row(self) -> Dict[str, Any]:
        """
        Columns sent on insert.

        id and created_at are left out so the database fills them in.
        """
        return self.model_dump(exclude={"id", "created_at"})
