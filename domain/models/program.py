"""
Program-level value objects: training days and their tier assignments.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from domain.models.exercise import ExerciseRole, MAIN_LIFT_ROLES, Tier


class GZCLPDay(str, Enum):
    """The four rotating GZCLP workout days, in cycle order."""

    A1 = "A1"
    B1 = "B1"
    A2 = "A2"
    B2 = "B2"


class DayAssignment(BaseModel):
    """
    Which main lift is T1 and which is T2 on a given day.

    Main lifts not named here are absent from that day.
    """

    t1: ExerciseRole = Field(..., description="Main lift trained as T1")
    t2: ExerciseRole = Field(..., description="Main lift trained as T2")

    @model_validator(mode="after")
    def validate_roles(self) -> "DayAssignment":
        """Both slots must be distinct main lifts."""
        for role in (self.t1, self.t2):
            if role not in MAIN_LIFT_ROLES:
                raise ValueError(f"'{role.value}' is not a main lift role")
        if self.t1 == self.t2:
            raise ValueError("T1 and T2 must be different lifts")
        return self

    def tier_for(self, role: ExerciseRole) -> Optional[Tier]:
        """Tier of ``role`` on this day, or None if it is not scheduled."""
        if role == ExerciseRole.T3:
            return Tier.T3
        if role == self.t1:
            return Tier.T1
        if role == self.t2:
            return Tier.T2
        return None

    model_config = {"frozen": True}


TierTable = Dict[GZCLPDay, DayAssignment]


class RoutineAssignment(BaseModel):
    """
    Mapping of GZCLP days to the routine ids assigned to them.

    A day may be left unassigned (None).
    """

    A1: Optional[str] = None
    B1: Optional[str] = None
    A2: Optional[str] = None
    B2: Optional[str] = None

    def routine_for(self, day: GZCLPDay) -> Optional[str]:
        return getattr(self, day.value)

    def day_for_routine(self, routine_id: Optional[str]) -> Optional[GZCLPDay]:
        """First day (in cycle order) the routine is assigned to."""
        if not routine_id:
            return None
        for day in GZCLPDay:
            if self.routine_for(day) == routine_id:
                return day
        return None

    def assigned(self) -> List[tuple]:
        """(day, routine_id) pairs for assigned days, in cycle order."""
        return [
            (day, self.routine_for(day))
            for day in GZCLPDay
            if self.routine_for(day)
        ]

    model_config = {"frozen": True}
