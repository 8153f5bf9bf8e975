"""
History importer.

Backfills progression history from already-fetched workouts. Workouts are
mapped to GZCLP days through the routine they were logged from; workouts
from other routines are ignored. The historical stage is unknown, so
entries record stage 0 and a weight drop is read as a deload.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from domain.models import (
    ChangeType,
    ExerciseConfig,
    ExerciseHistory,
    HistoryEntry,
    LoggedWorkout,
    RoutineAssignment,
    TierTable,
)
from engine.core.roles import get_progression_key
from engine.core.workout_analysis import (
    derive_tier,
    extract_working_weight,
    match_workout_to_exercises,
    sort_workouts_chronologically,
)

logger = logging.getLogger(__name__)


@dataclass
class HistoryImportResult:
    """Imported history and counters."""

    history: Dict[str, ExerciseHistory] = field(default_factory=dict)
    workout_count: int = 0
    entry_count: int = 0


def import_progression_history(
    workouts: Sequence[LoggedWorkout],
    exercises: Mapping[str, ExerciseConfig],
    assignment: RoutineAssignment,
    tier_table: Optional[TierTable] = None,
) -> HistoryImportResult:
    """
    Build progression history from logged workouts.

    Args:
        workouts: Logged workouts in any order
        exercises: Configured exercises keyed by internal id
        assignment: Day -> routine id, used to find each workout's day
        tier_table: Day -> T1/T2 assignment; defaults to the GZCLP rotation

    Returns:
        HistoryImportResult; entries are unique per workout id and sorted
        by date
    """
    entries: Dict[str, List[HistoryEntry]] = {}
    headers: Dict[str, ExerciseConfig] = {}
    previous_weights: Dict[str, float] = {}
    workout_count = 0

    for workout in sort_workouts_chronologically(workouts):
        day = assignment.day_for_routine(workout.routine_id)
        if day is None:
            continue
        workout_count += 1

        for match in match_workout_to_exercises(workout, exercises):
            config = match.exercise
            weight = extract_working_weight(match.logged.sets)
            if weight <= 0:
                continue

            tier = derive_tier(config, day, tier_table)
            if tier is None:
                continue
            key = get_progression_key(match.exercise_id, config.role, tier)

            key_entries = entries.setdefault(key, [])
            if any(e.workout_id == workout.id for e in key_entries):
                continue

            previous = previous_weights.get(key)
            previous_weights[key] = weight
            headers.setdefault(key, config)

            key_entries.append(
                HistoryEntry(
                    date=workout.start_time,
                    workout_id=workout.id,
                    weight=weight,
                    stage=0,
                    tier=tier,
                    success=True,
                    change_type=(
                        ChangeType.DELOAD
                        if previous is not None and weight < previous
                        else ChangeType.PROGRESS
                    ),
                )
            )

    history = {
        key: ExerciseHistory(
            progression_key=key,
            exercise_name=headers[key].name,
            tier=key_entries[0].tier,
            role=headers[key].role,
            entries=sorted(key_entries, key=lambda e: e.date),
        )
        for key, key_entries in entries.items()
        if key_entries
    }
    entry_count = sum(len(h.entries) for h in history.values())

    logger.info(
        f"Imported {entry_count} history entries from {workout_count} workout(s) "
        f"across {len(history)} progression key(s)"
    )
    return HistoryImportResult(history=history, workout_count=workout_count, entry_count=entry_count)
