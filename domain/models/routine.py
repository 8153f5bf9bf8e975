"""
Previously authored routines, as read from the workout log.

Only the set structure matters to the engine: set type, weight and
repetition count per set.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout import SetType


class RoutineSet(BaseModel):
    """A planned set inside a routine."""

    type: SetType = SetType.NORMAL
    weight: Optional[float] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)

    model_config = {"frozen": True}


class RoutineExercise(BaseModel):
    """An exercise inside a routine, with its planned sets."""

    template_id: str
    title: str
    sets: List[RoutineSet] = Field(default_factory=list)

    @property
    def normal_sets(self) -> List[RoutineSet]:
        """Working sets only; warm-up, drop and failure sets are excluded."""
        return [s for s in self.sets if s.type == SetType.NORMAL]

    model_config = {"frozen": True}


class Routine(BaseModel):
    """
    A routine as authored in the workout log.

    Exercise order matters: position 0 is read as the day's T1, position 1
    as its T2 and the rest as T3 accessories.
    """

    id: str
    title: str = ""
    updated_at: Optional[datetime] = None
    exercises: List[RoutineExercise] = Field(default_factory=list)

    model_config = {"frozen": True}
