"""
Import analysis.

Suggests the next session for an imported routine exercise from the most
recent time it was actually logged, reusing the tier progression rules.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Tuple

from domain.models import (
    ChangeType,
    LoggedExercise,
    LoggedWorkout,
    MuscleGroup,
    ProgressionState,
    Stage,
    Tier,
    WeightUnit,
)
from engine.core.progression import calculate_progression
from engine.core.workout_analysis import extract_reps_from_sets, extract_working_weight


@dataclass(frozen=True)
class WorkoutPerformance:
    workout_id: str
    workout_date: datetime
    weight: float
    reps: Tuple[int, ...]

    @property
    def total_sets(self) -> int:
        return len(self.reps)


@dataclass(frozen=True)
class ProgressionSuggestion:
    type: ChangeType
    suggested_weight: float
    suggested_stage: Stage
    new_scheme: str
    reason: str
    success: bool
    amrap_reps: Optional[int] = None


@dataclass(frozen=True)
class ImportAnalysis:
    """Performance and suggestion for one exercise; both None without data."""

    tier: Tier
    performance: Optional[WorkoutPerformance] = None
    suggestion: Optional[ProgressionSuggestion] = None

    @property
    def has_workout_data(self) -> bool:
        return self.performance is not None


def find_most_recent_workout_for_exercise(
    workouts: Sequence[LoggedWorkout],
    routine_id: str,
    template_id: str,
) -> Optional[Tuple[LoggedWorkout, LoggedExercise]]:
    """Latest workout of ``routine_id`` that contains ``template_id``."""
    candidates = sorted(
        (w for w in workouts if w.routine_id == routine_id),
        key=lambda w: w.start_time,
        reverse=True,
    )
    for workout in candidates:
        for exercise in workout.exercises:
            if exercise.template_id == template_id:
                return workout, exercise
    return None


def analyze_exercise_performance(
    exercise: LoggedExercise,
    workout: LoggedWorkout,
) -> WorkoutPerformance:
    return WorkoutPerformance(
        workout_id=workout.id,
        workout_date=workout.start_time,
        weight=extract_working_weight(exercise.sets),
        reps=tuple(extract_reps_from_sets(exercise.sets)),
    )


def calculate_import_progression(
    performance: WorkoutPerformance,
    current_stage: Stage,
    tier: Tier,
    muscle_group: MuscleGroup,
    unit: WeightUnit,
) -> ProgressionSuggestion:
    """
    Run the progression rules against a logged performance.

    There is no stored state during import, so the logged weight is used as
    both current and base weight with no AMRAP record.
    """
    state = ProgressionState(
        exercise_id="",
        current_weight=performance.weight,
        stage=current_stage,
        base_weight=performance.weight,
        last_workout_id=performance.workout_id,
        last_workout_date=performance.workout_date,
    )
    result = calculate_progression(tier, state, performance.reps, muscle_group, unit)

    return ProgressionSuggestion(
        type=result.type,
        suggested_weight=result.new_weight,
        suggested_stage=result.new_stage,
        new_scheme=result.new_scheme,
        reason=f"{result.reason} (from {performance.workout_date:%b} {performance.workout_date.day})",
        success=result.success,
        amrap_reps=result.amrap_reps,
    )


def analyze_exercise_for_import(
    workouts: Sequence[LoggedWorkout],
    routine_id: str,
    template_id: str,
    detected_stage: Stage,
    tier: Tier,
    muscle_group: MuscleGroup,
    unit: WeightUnit,
) -> ImportAnalysis:
    """
    Full analysis for one imported exercise.

    Examples:
        >>> analysis = analyze_exercise_for_import(
        ...     [], "routine-a1", "D04AC939", 0, Tier.T1, MuscleGroup.LOWER, WeightUnit.KG
        ... )
        >>> analysis.has_workout_data
        False
    """
    found = find_most_recent_workout_for_exercise(workouts, routine_id, template_id)
    if found is None:
        return ImportAnalysis(tier=tier)

    workout, exercise = found
    performance = analyze_exercise_performance(exercise, workout)
    suggestion = calculate_import_progression(
        performance, detected_stage, tier, muscle_group, unit
    )
    return ImportAnalysis(tier=tier, performance=performance, suggestion=suggestion)
