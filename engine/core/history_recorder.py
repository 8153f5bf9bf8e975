"""
Progression history recording.

History is append-only, keyed by progression key and unique per workout id.
Recording the same change twice is a no-op.
"""

from functools import reduce
from typing import Dict, Iterable, Mapping

from domain.models import ExerciseConfig, ExerciseHistory, HistoryEntry, PendingChange


def create_history_entry_from_change(change: PendingChange) -> HistoryEntry:
    """History entry for a change, dated by its source workout."""
    return HistoryEntry(
        date=change.workout_date,
        workout_id=change.workout_id,
        weight=change.current_weight,
        stage=change.current_stage,
        tier=change.tier,
        success=change.success,
        amrap_reps=change.amrap_reps,
        change_type=change.type,
    )


def record_progression_history(
    history: Mapping[str, ExerciseHistory],
    change: PendingChange,
    exercises: Mapping[str, ExerciseConfig],
) -> Dict[str, ExerciseHistory]:
    """
    Record ``change`` under its progression key.

    Args:
        history: Current history keyed by progression key
        change: The change to record
        exercises: Configured exercises, used to name a brand-new key

    Returns:
        Updated history; other keys are passed through unchanged
    """
    key = change.progression_key
    existing = history.get(key)

    if existing is not None and existing.has_workout(change.workout_id):
        return dict(history)

    entry = create_history_entry_from_change(change)

    if existing is not None:
        recorded = existing.model_copy(
            update={"entries": sorted([*existing.entries, entry], key=lambda e: e.date)}
        )
    else:
        exercise = exercises.get(change.exercise_id)
        recorded = ExerciseHistory(
            progression_key=key,
            exercise_name=exercise.name if exercise else change.exercise_name,
            tier=change.tier,
            role=exercise.role if exercise else None,
            entries=[entry],
        )

    updated = dict(history)
    updated[key] = recorded
    return updated


def record_multiple_changes(
    history: Mapping[str, ExerciseHistory],
    changes: Iterable[PendingChange],
    exercises: Mapping[str, ExerciseConfig],
) -> Dict[str, ExerciseHistory]:
    return reduce(
        lambda acc, change: record_progression_history(acc, change, exercises),
        changes,
        dict(history),
    )
