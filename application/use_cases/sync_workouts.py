"""
SyncWorkouts Use Case.

Turns a batch of fetched workouts into reviewable pending changes and
discrepancy reports. Nothing is applied: the result is handed to the user
for review, and approved changes go through apply_all_pending_changes().
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from domain.models import (
    DiscrepancyInfo,
    ExerciseConfig,
    LoggedWorkout,
    PendingChange,
    ProgressionState,
    RoutineAssignment,
    TierTable,
    WeightUnit,
)
from engine.core.pending_changes import create_pending_changes_from_analysis
from engine.core.reconciliation import deduplicate_discrepancies
from engine.core.workout_analysis import (
    analyze_workout,
    collect_discrepancies,
    filter_new_workouts,
    sort_workouts_chronologically,
)
from engine.exceptions import EngineError
from engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class SyncWorkoutsResult:
    """Result of the SyncWorkouts use case execution."""

    success: bool
    pending_changes: List[PendingChange] = field(default_factory=list)
    discrepancies: List[DiscrepancyInfo] = field(default_factory=list)
    processed_workout_ids: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def last_processed_workout_id(self) -> Optional[str]:
        return self.processed_workout_ids[-1] if self.processed_workout_ids else None


class SyncWorkoutsUseCase:
    """
    Use case for analyzing newly logged workouts.

    Orchestrates the following workflow:
    1. Sort workouts oldest first and drop already-processed ones
    2. Resolve each workout's GZCLP day from its routine
    3. Analyze matched exercises and build one pending change per analyzed
       exercise per workout, oldest workout first
    4. Deduplicate discrepancies per (exercise, tier), most recent workout
       winning

    Usage:
        >>> use_case = SyncWorkoutsUseCase()
        >>> result = use_case.execute(
        ...     workouts=workouts,
        ...     exercises=exercises,
        ...     progression=progression,
        ...     assignment=assignment,
        ... )
        >>> for change in result.pending_changes:
        ...     print(change)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tier_table: Optional[TierTable] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            settings: Engine settings; defaults to get_settings()
            tier_table: Day -> T1/T2 assignment; defaults to the GZCLP rotation
            id_factory: Generates pending change ids (uuid4 by default)
        """
        self._settings = settings or get_settings()
        self._tier_table = tier_table
        self._id_factory = id_factory

    def execute(
        self,
        workouts: Sequence[LoggedWorkout],
        exercises: Mapping[str, ExerciseConfig],
        progression: Mapping[str, ProgressionState],
        assignment: RoutineAssignment,
        unit: Optional[WeightUnit] = None,
        *,
        last_processed_workout_id: Optional[str] = None,
    ) -> SyncWorkoutsResult:
        """
        Execute the sync workflow.

        Args:
            workouts: Fetched workouts, any order
            exercises: Configured exercises keyed by internal id
            progression: Stored progression keyed by progression key
            assignment: Day -> routine id, used to resolve each workout's day
            unit: Weight unit; defaults to the configured unit
            last_processed_workout_id: Workouts up to and including this one
                are skipped

        Returns:
            SyncWorkoutsResult with every change, oldest workout first, and
            deduplicated discrepancies
        """
        unit = unit or self._settings.weight_unit
        extra: Dict[str, Callable[[], str]] = (
            {"id_factory": self._id_factory} if self._id_factory else {}
        )

        try:
            ordered = sort_workouts_chronologically(workouts)
            new_workouts = filter_new_workouts(ordered, last_processed_workout_id)

            changes: List[PendingChange] = []
            discrepancies: List[DiscrepancyInfo] = []

            for workout in new_workouts:
                day = assignment.day_for_routine(workout.routine_id)
                results = analyze_workout(
                    workout, exercises, progression, day=day, tier_table=self._tier_table
                )
                changes.extend(
                    create_pending_changes_from_analysis(
                        results, exercises, progression, unit, **extra
                    )
                )
                discrepancies.extend(collect_discrepancies(results))

            reported = deduplicate_discrepancies(discrepancies)

            logger.info(
                f"Synced {len(new_workouts)} workout(s): {len(changes)} pending change(s), "
                f"{len(reported)} discrepancy report(s)"
            )

            return SyncWorkoutsResult(
                success=True,
                pending_changes=changes,
                discrepancies=reported,
                processed_workout_ids=[w.id for w in new_workouts],
            )

        except EngineError as e:
            logger.exception(f"Workout sync failed: {e}")
            return SyncWorkoutsResult(success=False, error=str(e))
