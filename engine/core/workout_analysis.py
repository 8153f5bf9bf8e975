"""
Workout analysis.

Matches logged workout data to configured exercises and extracts the
progression-relevant numbers for each match:
1. Rep extraction (warm-up sets excluded, missing reps count as 0)
2. Exercise matching by external template id
3. Per-exercise analysis with weight discrepancy detection
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from domain.models import (
    DiscrepancyInfo,
    ExerciseConfig,
    GZCLPDay,
    LoggedExercise,
    LoggedSet,
    LoggedWorkout,
    ProgressionState,
    SetType,
    Tier,
    TierTable,
    WeightDiscrepancy,
)
from engine.core.roles import get_progression_key, get_tier_for_day, is_main_lift_role

logger = logging.getLogger(__name__)


# =============================================================================
# Set Processing
# =============================================================================


def extract_reps_from_sets(sets: Iterable[LoggedSet]) -> List[int]:
    """
    Extract the achieved-reps sequence from logged sets.

    Warm-up sets are excluded; every other set type is kept in logged
    order. A missing rep count is a logged-but-failed set and counts as 0.
    """
    return [s.reps if s.reps is not None else 0 for s in sets if s.type != SetType.WARMUP]


def extract_working_weight(sets: Iterable[LoggedSet]) -> float:
    """Weight of the first normal set, or 0 when there is none."""
    for s in sets:
        if s.type == SetType.NORMAL:
            return s.weight if s.weight is not None else 0.0
    return 0.0


# =============================================================================
# Matching
# =============================================================================


@dataclass(frozen=True)
class ExerciseMatch:
    """A logged exercise entry paired with its configured exercise."""

    exercise_id: str
    exercise: ExerciseConfig
    logged: LoggedExercise


def match_workout_to_exercises(
    workout: LoggedWorkout,
    exercises: Mapping[str, ExerciseConfig],
) -> List[ExerciseMatch]:
    """
    Match logged exercise entries to configured exercises by template id.

    Unmatched entries (accessory work outside the program) are dropped.
    Matches keep the logged order.
    """
    by_template: Dict[str, ExerciseConfig] = {
        config.template_id: config for config in exercises.values()
    }

    matches: List[ExerciseMatch] = []
    for logged in workout.exercises:
        config = by_template.get(logged.template_id)
        if config is not None:
            matches.append(ExerciseMatch(exercise_id=config.id, exercise=config, logged=logged))
    return matches


# =============================================================================
# Analysis
# =============================================================================


@dataclass(frozen=True)
class WorkoutAnalysisResult:
    """Progression-relevant data for one matched exercise in one workout."""

    exercise_id: str
    exercise_name: str
    tier: Tier
    progression_key: str
    reps: Tuple[int, ...]
    weight: float
    workout_id: str
    workout_date: datetime
    discrepancy: Optional[WeightDiscrepancy] = None
    day: Optional[GZCLPDay] = None

    @property
    def has_discrepancy(self) -> bool:
        return self.discrepancy is not None


def derive_tier(
    exercise: ExerciseConfig,
    day: Optional[GZCLPDay],
    tier_table: Optional[TierTable] = None,
) -> Optional[Tier]:
    """
    Tier of an exercise on a day.

    Main lifts need a day to be tiered; without one (or when the lift is not
    scheduled that day) None is returned instead of guessing.
    """
    if exercise.role is None:
        return None
    if not is_main_lift_role(exercise.role):
        return Tier.T3
    if day is None:
        return None
    return get_tier_for_day(exercise.role, day, tier_table)


def analyze_workout(
    workout: LoggedWorkout,
    exercises: Mapping[str, ExerciseConfig],
    progression: Mapping[str, ProgressionState],
    day: Optional[GZCLPDay] = None,
    tier_table: Optional[TierTable] = None,
) -> List[WorkoutAnalysisResult]:
    """
    Analyze a workout against the configured exercises and stored state.

    Args:
        workout: The logged workout
        exercises: Configured exercises keyed by internal id
        progression: Stored progression keyed by progression key
        day: GZCLP day the workout was performed as
        tier_table: Day -> T1/T2 assignment; defaults to the GZCLP rotation

    Returns:
        One result per matched, tiered exercise, in logged order
    """
    results: List[WorkoutAnalysisResult] = []

    for match in match_workout_to_exercises(workout, exercises):
        config = match.exercise

        if config.role is None:
            continue

        tier = derive_tier(config, day, tier_table)
        if tier is None:
            logger.debug(
                f"Skipping '{config.name}' in workout {workout.id}: "
                f"no tier for role '{config.role.value}' on day {day.value if day else None}"
            )
            continue

        reps = extract_reps_from_sets(match.logged.sets)
        weight = extract_working_weight(match.logged.sets)
        key = get_progression_key(match.exercise_id, config.role, tier)

        discrepancy = None
        stored = progression.get(key)
        if stored is not None and stored.current_weight != weight:
            discrepancy = WeightDiscrepancy(
                stored_weight=stored.current_weight,
                actual_weight=weight,
            )

        results.append(
            WorkoutAnalysisResult(
                exercise_id=match.exercise_id,
                exercise_name=config.name,
                tier=tier,
                progression_key=key,
                reps=tuple(reps),
                weight=weight,
                workout_id=workout.id,
                workout_date=workout.start_time,
                discrepancy=discrepancy,
                day=day,
            )
        )

    return results


def collect_discrepancies(results: Iterable[WorkoutAnalysisResult]) -> List[DiscrepancyInfo]:
    """Turn analysis results carrying a discrepancy into discrepancy reports."""
    return [
        DiscrepancyInfo(
            exercise_id=r.exercise_id,
            exercise_name=r.exercise_name,
            tier=r.tier,
            stored_weight=r.discrepancy.stored_weight,
            actual_weight=r.discrepancy.actual_weight,
            workout_id=r.workout_id,
            workout_date=r.workout_date,
        )
        for r in results
        if r.discrepancy is not None
    ]


# =============================================================================
# Batch Helpers
# =============================================================================


def sort_workouts_chronologically(workouts: Sequence[LoggedWorkout]) -> List[LoggedWorkout]:
    """Oldest first. Stable for equal start times."""
    return sorted(workouts, key=lambda w: w.start_time)


def filter_new_workouts(
    workouts: Sequence[LoggedWorkout],
    last_processed_workout_id: Optional[str],
) -> List[LoggedWorkout]:
    """
    Workouts after the last processed one.

    ``workouts`` must already be in chronological order. If the last
    processed id is unknown (or not found), every workout is returned.
    """
    if not last_processed_workout_id:
        return list(workouts)

    for index, workout in enumerate(workouts):
        if workout.id == last_processed_workout_id:
            return list(workouts[index + 1:])
    return list(workouts)
