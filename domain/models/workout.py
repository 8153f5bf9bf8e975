"""
Logged workout records as delivered by the workout log.

These models are the input contract of the engine: they arrive already
parsed and are never mutated. Field names follow the log's own naming so
raw payloads can be loaded with ``LoggedWorkout.model_validate(payload)``.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.dates import as_utc


class SetType(str, Enum):
    """
    Kind of a logged set.

    Warm-up sets never count towards progression.
    """

    WARMUP = "warmup"
    NORMAL = "normal"
    FAILURE = "failure"
    DROPSET = "dropset"


class LoggedSet(BaseModel):
    """A single logged set. ``reps`` is None when the set was logged but not completed."""

    type: SetType = Field(default=SetType.NORMAL, description="Set type")
    weight: Optional[float] = Field(
        default=None, ge=0, description="Weight lifted, in the program's unit"
    )
    reps: Optional[int] = Field(default=None, ge=0, description="Repetitions performed")

    model_config = {"frozen": True}


class LoggedExercise(BaseModel):
    """An exercise entry inside a logged workout."""

    template_id: str = Field(..., description="External exercise template id")
    title: str = Field(default="", description="Exercise title as shown in the log")
    sets: List[LoggedSet] = Field(default_factory=list, description="Sets in logged order")

    model_config = {"frozen": True}


class LoggedWorkout(BaseModel):
    """
    A workout as recorded in the log.

    Examples:
        >>> workout = LoggedWorkout(
        ...     id="w-1",
        ...     start_time="2024-01-10T09:00:00Z",
        ...     exercises=[
        ...         LoggedExercise(
        ...             template_id="D04AC939",
        ...             sets=[LoggedSet(weight=100, reps=3)] * 5,
        ...         )
        ...     ],
        ... )
        >>> workout.exercise_count
        1
    """

    id: str = Field(..., min_length=1, description="Workout id")
    title: str = Field(default="", description="Workout title")
    routine_id: Optional[str] = Field(
        default=None, description="Routine the workout was started from, if any"
    )
    start_time: datetime = Field(..., description="Start/effective date of the workout")
    exercises: List[LoggedExercise] = Field(
        default_factory=list, description="Exercise entries in logged order"
    )

    @field_validator("start_time")
    @classmethod
    def normalize_start_time(cls, v: datetime) -> datetime:
        """Date-only or naive timestamps are taken as UTC."""
        return as_utc(v)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    model_config = {"frozen": True}
