"""
Progression state and pending change value objects.

ProgressionState is stored per progression key ("squat-T1", "squat-T2",
or a bare exercise id for T3 accessories). A PendingChange is a proposed,
not yet applied mutation of one such entry.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.dates import as_utc
from domain.models.discrepancy import WeightDiscrepancy
from domain.models.exercise import Tier
from domain.models.program import GZCLPDay


Stage = Literal[0, 1, 2]


class ChangeType(str, Enum):
    """
    Kind of progression change.

    - PROGRESS: all prescribed sets hit target, weight goes up
    - STAGE_CHANGE: failed at stage 0 or 1, move to the next rep scheme
    - DELOAD: failed at stage 2, drop to 85% and restart at stage 0
    - REPEAT: T3 accessory missed its target, repeat the same weight
    """

    PROGRESS = "progress"
    STAGE_CHANGE = "stage_change"
    DELOAD = "deload"
    REPEAT = "repeat"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProgressionState(BaseModel):
    """
    Stored progression of a single progression key.

    Examples:
        >>> state = ProgressionState(
        ...     exercise_id="ex-1", current_weight=100, stage=0, base_weight=100
        ... )
        >>> state.amrap_record
        0
    """

    exercise_id: str = Field(..., description="Exercise the entry belongs to")
    current_weight: float = Field(..., ge=0, description="Current working weight")
    stage: Stage = Field(default=0, description="Position in the tier's rep-scheme ladder")
    base_weight: float = Field(
        ..., ge=0, description="Last stage-0 anchor weight, used for deloads"
    )
    last_workout_id: Optional[str] = None
    last_workout_date: Optional[datetime] = None
    amrap_record: int = Field(default=0, ge=0, description="Best AMRAP rep count")
    amrap_record_date: Optional[datetime] = None
    amrap_record_workout_id: Optional[str] = None

    @field_validator("last_workout_date", "amrap_record_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    model_config = {"frozen": True}


class PendingChange(BaseModel):
    """
    Immutable, reviewable proposal produced from one analyzed exercise.

    ``current_weight``/``current_stage`` describe the stored state before the
    change; ``new_weight``/``new_stage`` the state after it is applied.
    """

    id: str = Field(..., description="Unique change id")
    progression_key: str = Field(..., description="Key of the ProgressionState to update")
    exercise_id: str
    exercise_name: str
    tier: Tier
    type: ChangeType

    current_weight: float = Field(..., ge=0)
    current_stage: Stage
    new_weight: float = Field(..., ge=0)
    new_stage: Stage
    new_scheme: str = Field(..., description="Rep scheme for the next session, e.g. '5x3+'")

    reason: str
    workout_id: str
    workout_date: datetime
    created_at: datetime = Field(default_factory=_utcnow)

    success: bool = False
    amrap_reps: Optional[int] = Field(default=None, ge=0)
    new_pr: bool = False
    new_amrap_record: Optional[int] = Field(default=None, ge=0)

    sets_completed: int = Field(default=0, ge=0)
    sets_target: int = Field(default=0, ge=0)
    day: Optional[GZCLPDay] = None
    discrepancy: Optional[WeightDiscrepancy] = None

    @field_validator("workout_date", "created_at")
    @classmethod
    def normalize_dates(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def weight_delta(self) -> float:
        return self.new_weight - self.current_weight

    def __str__(self) -> str:
        return (
            f"{self.exercise_name}: {self.type.value} "
            f"{self.current_weight:g} -> {self.new_weight:g} ({self.new_scheme})"
        )

    model_config = {"frozen": True}
