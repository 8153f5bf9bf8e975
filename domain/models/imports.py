"""
Routine import value objects.

These exist only during guided setup: an ImportResult is reviewed by the
user (who may override weights and stages) and then materialized into
ExerciseConfig and ProgressionState entries.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.exercise import ExerciseRole, Tier
from domain.models.program import GZCLPDay, RoutineAssignment
from domain.models.progression import Stage


class StageConfidence(str, Enum):
    """
    How a stage was determined.

    - HIGH: set/rep structure matched a known GZCLP pattern
    - MANUAL: no pattern matched; the stage comes from the user
    """

    HIGH = "high"
    MANUAL = "manual"


class ImportWarningType(str, Enum):
    NO_T2 = "no_t2"
    STAGE_UNKNOWN = "stage_unknown"
    DUPLICATE_ROUTINE = "duplicate_routine"
    WEIGHT_NULL = "weight_null"


class ImportedExercise(BaseModel):
    """
    An exercise extracted from a routine, pending user confirmation.

    ``detected_stage`` is None when the structure did not match any known
    pattern; such an exercise needs ``user_stage`` before it can be used.
    """

    day: GZCLPDay
    tier: Tier
    role: ExerciseRole
    template_id: str
    name: str

    detected_weight: float = Field(default=0, ge=0)
    detected_stage: Optional[Stage] = None
    stage_confidence: StageConfidence = StageConfidence.MANUAL

    original_set_count: int = Field(default=0, ge=0)
    original_rep_scheme: str = ""

    user_weight: Optional[float] = Field(default=None, ge=0)
    user_stage: Optional[Stage] = None

    @property
    def effective_weight(self) -> float:
        return self.user_weight if self.user_weight is not None else self.detected_weight

    @property
    def effective_stage(self) -> Optional[Stage]:
        return self.user_stage if self.user_stage is not None else self.detected_stage

    @property
    def needs_stage(self) -> bool:
        return self.effective_stage is None

    def with_overrides(
        self,
        weight: Optional[float] = None,
        stage: Optional[Stage] = None,
    ) -> "ImportedExercise":
        """
        Return a copy carrying user overrides.

        A user-supplied stage turns the confidence into MANUAL.
        """
        update = {}
        if weight is not None:
            update["user_weight"] = weight
        if stage is not None:
            update["user_stage"] = stage
            update["stage_confidence"] = StageConfidence.MANUAL
        return self.model_copy(update=update)

    model_config = {"frozen": True}


class ImportWarning(BaseModel):
    """Advisory annotation raised during import. Never blocks completion."""

    type: ImportWarningType
    message: str
    day: Optional[GZCLPDay] = None

    model_config = {"frozen": True}


class ImportResult(BaseModel):
    """Everything extracted from the assigned routines."""

    exercises: List[ImportedExercise] = Field(default_factory=list)
    warnings: List[ImportWarning] = Field(default_factory=list)
    assignment: RoutineAssignment = Field(default_factory=RoutineAssignment)

    @property
    def unresolved(self) -> List[ImportedExercise]:
        """Exercises that still need a stage from the user."""
        return [e for e in self.exercises if e.needs_stage]

    def warnings_of(self, warning_type: ImportWarningType) -> List[ImportWarning]:
        return [w for w in self.warnings if w.type == warning_type]

    def for_day(self, day: GZCLPDay) -> List[ImportedExercise]:
        return [e for e in self.exercises if e.day == day]

    model_config = {"frozen": True}
