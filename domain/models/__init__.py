"""
Domain models for the GZCLP progression engine.

This package contains pure domain models that are independent of
infrastructure concerns (storage, network, presentation).

These models represent the core concepts:
- ExerciseConfig: A configured lift and its program role
- LoggedWorkout: A workout as recorded in the log (input)
- ProgressionState: Stored weight/stage per progression key
- PendingChange: A reviewable, not yet applied progression change
- ExerciseHistory: Append-only log of recorded changes
- DiscrepancyInfo: Stored vs. logged weight mismatch
- Routine / ImportedExercise / ImportResult: Routine import

All models are frozen (value object semantics).

Usage:
    >>> from domain.models import ProgressionState, LoggedWorkout

    >>> state = ProgressionState(
    ...     exercise_id="ex-1", current_weight=100, stage=0, base_weight=100
    ... )
    >>> state.model_dump_json()
"""

from domain.models.discrepancy import DiscrepancyInfo, WeightDiscrepancy
from domain.models.exercise import (
    MAIN_LIFT_ROLES,
    ExerciseConfig,
    ExerciseRole,
    MuscleGroup,
    Tier,
    WeightUnit,
)
from domain.models.history import ExerciseHistory, HistoryEntry
from domain.models.imports import (
    ImportedExercise,
    ImportResult,
    ImportWarning,
    ImportWarningType,
    StageConfidence,
)
from domain.models.program import DayAssignment, GZCLPDay, RoutineAssignment, TierTable
from domain.models.progression import ChangeType, PendingChange, ProgressionState, Stage
from domain.models.routine import Routine, RoutineExercise, RoutineSet
from domain.models.workout import LoggedExercise, LoggedSet, LoggedWorkout, SetType

__all__ = [
    # Main entities
    "ExerciseConfig",
    "ProgressionState",
    "PendingChange",
    "ExerciseHistory",
    "HistoryEntry",
    "DiscrepancyInfo",
    "WeightDiscrepancy",
    "LoggedWorkout",
    "LoggedExercise",
    "LoggedSet",
    "Routine",
    "RoutineExercise",
    "RoutineSet",
    "RoutineAssignment",
    "DayAssignment",
    "ImportedExercise",
    "ImportResult",
    "ImportWarning",
    # Enums and aliases
    "Tier",
    "ExerciseRole",
    "MAIN_LIFT_ROLES",
    "MuscleGroup",
    "WeightUnit",
    "GZCLPDay",
    "TierTable",
    "ChangeType",
    "Stage",
    "SetType",
    "StageConfidence",
    "ImportWarningType",
]
