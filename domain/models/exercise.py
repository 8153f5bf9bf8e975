"""
Exercise configuration value object and the enums that classify lifts.

An ExerciseConfig is the program's identity for a lift: it links the
external template id used by the workout log to the role the lift plays
in GZCLP (one of the four main lifts, or a T3 accessory).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Tier(str, Enum):
    """
    Tier of a lift for a given day.

    - T1: primary heavy lift (5x3+, 6x2+, 10x1+)
    - T2: secondary volume lift (3x10, 3x8, 3x6)
    - T3: accessory (3x15+)
    """

    T1 = "T1"
    T2 = "T2"
    T3 = "T3"


class ExerciseRole(str, Enum):
    """Role an exercise plays in the program."""

    SQUAT = "squat"
    BENCH = "bench"
    OHP = "ohp"
    DEADLIFT = "deadlift"
    T3 = "t3"


MAIN_LIFT_ROLES = (
    ExerciseRole.SQUAT,
    ExerciseRole.BENCH,
    ExerciseRole.OHP,
    ExerciseRole.DEADLIFT,
)


class MuscleGroup(str, Enum):
    """Muscle-group classification used to pick the weight increment."""

    UPPER = "upper"
    LOWER = "lower"


class WeightUnit(str, Enum):
    """Measurement unit active for a program."""

    KG = "kg"
    LBS = "lbs"


class ExerciseConfig(BaseModel):
    """
    Value object representing a configured exercise.

    Examples:
        >>> squat = ExerciseConfig(
        ...     id="ex-1",
        ...     template_id="D04AC939",
        ...     name="Squat (Barbell)",
        ...     role=ExerciseRole.SQUAT,
        ... )
        >>> squat.is_main_lift
        True
    """

    id: str = Field(..., min_length=1, description="Internal exercise id")
    template_id: str = Field(
        ..., min_length=1, description="External exercise template id from the workout log"
    )
    name: str = Field(..., min_length=1, description="Display name")
    role: Optional[ExerciseRole] = Field(
        default=None,
        description="Program role; exercises without a role are ignored by the engine",
    )

    @property
    def is_main_lift(self) -> bool:
        """True for squat, bench, ohp and deadlift."""
        return self.role in MAIN_LIFT_ROLES

    def __str__(self) -> str:
        role = self.role.value if self.role else "unassigned"
        return f"{self.name} ({role})"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "ex-1",
                    "template_id": "D04AC939",
                    "name": "Squat (Barbell)",
                    "role": "squat",
                },
                {
                    "id": "ex-7",
                    "template_id": "6A6C31A5",
                    "name": "Lat Pulldown (Cable)",
                    "role": "t3",
                },
            ]
        },
    }
