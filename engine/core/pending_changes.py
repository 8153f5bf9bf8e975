"""
Pending change construction.

Turns workout analysis results into immutable, reviewable PendingChange
proposals. Each analyzed exercise yields one independent change; tiers
never influence each other because every change is computed from its own
progression key.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Iterable, List, Mapping, Optional

from domain.models import (
    ExerciseConfig,
    GZCLPDay,
    PendingChange,
    ProgressionState,
    Tier,
    WeightDiscrepancy,
    WeightUnit,
)
from engine.core.progression import ProgressionResult, calculate_progression, get_rep_scheme
from engine.core.roles import get_muscle_group, get_progression_key, is_main_lift_role
from engine.core.workout_analysis import WorkoutAnalysisResult

logger = logging.getLogger(__name__)


def _generate_id() -> str:
    return str(uuid.uuid4())


def display_name(exercise: ExerciseConfig, tier: Tier) -> str:
    """Main lifts carry their tier as a prefix, e.g. "T1 Squat"."""
    if is_main_lift_role(exercise.role) and tier in (Tier.T1, Tier.T2):
        return f"{tier.value} {exercise.name}"
    return exercise.name


def create_pending_change(
    exercise: ExerciseConfig,
    progression: ProgressionState,
    result: ProgressionResult,
    workout_id: str,
    workout_date: datetime,
    tier: Tier,
    day: Optional[GZCLPDay] = None,
    sets_completed: int = 0,
    sets_target: int = 0,
    discrepancy: Optional[WeightDiscrepancy] = None,
    id_factory: Callable[[], str] = _generate_id,
) -> PendingChange:
    """
    Build a PendingChange from a progression result.

    ``current_weight``/``current_stage`` come from the stored progression,
    so a change computed on a discrepant logged weight still shows what it
    replaces.
    """
    return PendingChange(
        id=id_factory(),
        progression_key=get_progression_key(exercise.id, exercise.role, tier),
        exercise_id=exercise.id,
        exercise_name=display_name(exercise, tier),
        tier=tier,
        type=result.type,
        current_weight=progression.current_weight,
        current_stage=progression.stage,
        new_weight=result.new_weight,
        new_stage=result.new_stage,
        new_scheme=result.new_scheme,
        reason=result.reason,
        workout_id=workout_id,
        workout_date=workout_date,
        success=result.success,
        amrap_reps=result.amrap_reps,
        new_pr=result.is_new_record,
        new_amrap_record=result.new_amrap_record,
        sets_completed=sets_completed,
        sets_target=sets_target,
        day=day,
        discrepancy=discrepancy,
    )


def create_pending_changes_from_analysis(
    results: Iterable[WorkoutAnalysisResult],
    exercises: Mapping[str, ExerciseConfig],
    progression: Mapping[str, ProgressionState],
    unit: WeightUnit,
    id_factory: Callable[[], str] = _generate_id,
) -> List[PendingChange]:
    """
    Create one PendingChange per analysis result.

    The rules run on the weight actually logged. Results whose exercise or
    progression entry is missing are skipped.

    Args:
        results: Analysis results, typically from analyze_workout()
        exercises: Configured exercises keyed by internal id
        progression: Stored progression keyed by progression key
        unit: Active weight unit
        id_factory: Generates change ids (uuid4 by default)

    Returns:
        Pending changes in result order
    """
    changes: List[PendingChange] = []

    for result in results:
        exercise = exercises.get(result.exercise_id)
        if exercise is None or exercise.role is None:
            continue

        stored = progression.get(result.progression_key)
        if stored is None:
            logger.warning(
                f"Skipping '{exercise.name}' ({result.tier.value}): progression key "
                f"'{result.progression_key}' not found. Available keys: {sorted(progression)}"
            )
            continue

        logged = stored.model_copy(update={"current_weight": result.weight})
        outcome = calculate_progression(
            result.tier,
            logged,
            result.reps,
            get_muscle_group(exercise.role),
            unit,
        )
        scheme = get_rep_scheme(result.tier, logged.stage if result.tier != Tier.T3 else 0)

        change = create_pending_change(
            exercise=exercise,
            progression=stored,
            result=outcome,
            workout_id=result.workout_id,
            workout_date=result.workout_date,
            tier=result.tier,
            day=result.day,
            sets_completed=len(result.reps),
            sets_target=scheme.sets,
            discrepancy=result.discrepancy,
            id_factory=id_factory,
        )
        logger.debug(f"Pending change for workout {result.workout_id}: {change}")
        changes.append(change)

    return changes


def modify_pending_change_weight(change: PendingChange, new_weight: float) -> PendingChange:
    """Return a copy of ``change`` with a user-chosen target weight."""
    return change.model_copy(
        update={
            "new_weight": new_weight,
            "reason": (
                f"Modified by user: {change.current_weight:g} -> {new_weight:g} "
                f"(original suggestion: {change.new_weight:g})"
            ),
        }
    )
