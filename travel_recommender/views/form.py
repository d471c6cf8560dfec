"""
Preference form controller.

Holds the form state (field values, per-field errors, submitting flag) and
runs the submit flow:

1. Validate locally with PreferenceInput (no network call on failure)
2. POST to /api/recommend through RecommendationApiClient
3. On failure raise an alert and stop, nothing is persisted
4. On success append the merged record to the store
5. Reset the form once the write has completed
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Mapping, Optional

from pydantic import ValidationError

from travel_recommender.schemas.preferences import PreferenceInput
from travel_recommender.schemas.records import RecommendationRecord
from travel_recommender.services.recommend_client import (
    RecommendationApiClient,
    RecommendationRequestError,
)
from travel_recommender.services.record_store import RecordStore

logger = logging.getLogger(__name__)

FORM_FIELDS = ("username", "age", "style", "activity")

SubmitStatus = Literal["INVALID", "BUSY", "FAILED", "SAVE_FAILED", "SAVED"]


@dataclass
class SubmitOutcome:
    """Result of one submit attempt."""
    status: SubmitStatus
    record: Optional[RecommendationRecord] = None
    alert: Optional[str] = None


def _empty_values() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


class PreferenceForm:
    """
    One form instance.

    Args:
        api_client: Client for POST /api/recommend
        store: Recommendation record store
        on_alert: Called with the message whenever the user must be
            interrupted (endpoint failure, failed save)
    """

    def __init__(
        self,
        api_client: RecommendationApiClient,
        store: RecordStore,
        on_alert: Optional[Callable[[str], None]] = None,
    ):
        self._api_client = api_client
        self._store = store
        self._on_alert = on_alert
        self.values: Dict[str, str] = _empty_values()
        self.errors: Dict[str, str] = {}
        self.is_submitting = False

    def reset(self) -> None:
        """Back to empty defaults."""
        self.values = _empty_values()
        self.errors = {}

    def validate(self, data: Mapping[str, Any]) -> Optional[PreferenceInput]:
        """
        Validate raw form data, recording one message per failing field.

        Returns:
            PreferenceInput, or None when any field fails
        """
        self.values = {field: str(data.get(field) or "") for field in FORM_FIELDS}
        self.errors = {}

        try:
            return PreferenceInput(**self.values)
        except ValidationError as e:
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "form"
                self.errors.setdefault(field, error["msg"])
            logger.debug(f"Form validation failed for fields: {sorted(self.errors)}")
            return None

    def _alert(self, message: str) -> None:
        if self._on_alert is not None:
            self._on_alert(message)

    async def submit(self, data: Mapping[str, Any]) -> SubmitOutcome:
        """
        Run the full submit flow for one set of form values.

        Overlapping submits on the same form are refused while one is in
        flight.
        """
        if self.is_submitting:
            logger.warning("Submit ignored: a submission is already in progress")
            return SubmitOutcome(status="BUSY")

        preferences = self.validate(data)
        if preferences is None:
            return SubmitOutcome(status="INVALID")

        self.is_submitting = True
        try:
            try:
                result = await self._api_client.fetch_recommendation(preferences)
            except RecommendationRequestError as e:
                self._alert(e.message)
                return SubmitOutcome(status="FAILED", alert=e.message)

            record = RecommendationRecord.from_submission(preferences, result)

            # A failed write keeps the values on the form so the user can
            # resubmit.
            try:
                stored = await self._store.add_record(record)
            except Exception as e:
                logger.error(f"Failed to save recommendation: {e}")
                message = "Saving recommendation failed, please try again"
                self._alert(message)
                return SubmitOutcome(status="SAVE_FAILED", record=record, alert=message)

            self.reset()
            return SubmitOutcome(status="SAVED", record=stored)
        finally:
            self.is_submitting = False
