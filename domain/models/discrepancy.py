"""
Weight discrepancy value objects.

A discrepancy is advisory: the weight actually logged for an exercise
differs from the weight stored in its progression state. It never blocks
analysis and is only surfaced for acknowledgment.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from domain.models.dates import as_utc
from domain.models.exercise import Tier


class WeightDiscrepancy(BaseModel):
    """Stored vs. logged weight attached to a single analysis result."""

    stored_weight: float = Field(..., ge=0)
    actual_weight: float = Field(..., ge=0)

    @property
    def difference(self) -> float:
        return self.actual_weight - self.stored_weight

    model_config = {"frozen": True}


class DiscrepancyInfo(BaseModel):
    """
    A discrepancy report for one exercise/tier in one workout.

    Reports are keyed by (exercise_id, tier) when deduplicating.
    """

    exercise_id: str
    exercise_name: str
    tier: Tier
    stored_weight: float = Field(..., ge=0)
    actual_weight: float = Field(..., ge=0)
    workout_id: str
    workout_date: datetime

    @field_validator("workout_date")
    @classmethod
    def normalize_workout_date(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def dedup_key(self) -> tuple:
        return (self.exercise_id, self.tier)

    model_config = {"frozen": True}
