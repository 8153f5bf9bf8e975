"""
Progression history value objects.

History is append-only and stored per progression key. Entries are unique
per (progression key, workout id) and kept sorted by date.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.dates import as_utc
from domain.models.exercise import ExerciseRole, Tier
from domain.models.progression import ChangeType, Stage


class HistoryEntry(BaseModel):
    """One recorded session for a progression key."""

    date: datetime = Field(..., description="Date of the source workout")
    workout_id: str
    weight: float = Field(..., ge=0)
    stage: Stage
    tier: Tier
    success: bool
    amrap_reps: Optional[int] = Field(default=None, ge=0)
    change_type: ChangeType

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return as_utc(v)

    model_config = {"frozen": True}


class ExerciseHistory(BaseModel):
    """Chronological history of one progression key."""

    progression_key: str
    exercise_name: str
    tier: Tier
    role: Optional[ExerciseRole] = None
    entries: List[HistoryEntry] = Field(default_factory=list)

    def has_workout(self, workout_id: str) -> bool:
        return any(entry.workout_id == workout_id for entry in self.entries)

    @property
    def latest(self) -> Optional[HistoryEntry]:
        return self.entries[-1] if self.entries else None

    model_config = {"frozen": True}
