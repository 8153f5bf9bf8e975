"""
Unit tests for SyncWorkoutsUseCase.

Tests cover:
- Day resolution and per-workout analysis
- One pending change per analyzed exercise per workout
- Deduplication of discrepancies across workouts
- Mixed date-only and timestamped workouts
- Skipping already-processed workouts
- Unit selection from settings
- Idempotent end-to-end apply and record
"""

import pytest

from application.use_cases import SyncWorkoutsUseCase
from domain.models import ChangeType, LoggedWorkout, RoutineAssignment, WeightUnit
from engine.core.apply_changes import apply_all_pending_changes
from engine.core.history_recorder import record_multiple_changes
from engine.settings import Settings
from tests.helpers import (
    BENCH_TEMPLATE,
    ROW_TEMPLATE,
    SQUAT_TEMPLATE,
    logged_exercise,
    main_lift_setup,
    make_workout,
)

ASSIGNMENT = RoutineAssignment(A1="r-a1", B1="r-b1", A2="r-a2", B2="r-b2")


@pytest.fixture
def use_case(test_settings):
    """Use case with kg settings and deterministic ids."""
    ids = iter(f"chg-{i}" for i in range(100))
    return SyncWorkoutsUseCase(
        settings=test_settings,
        id_factory=lambda: next(ids),
    )


@pytest.mark.unit
class TestSyncWorkoutsUseCase:
    """Tests for SyncWorkoutsUseCase.execute."""

    def test_changes_per_tier(self, use_case):
        """An A1 workout yields independent T1, T2 and T3 changes."""
        exercises, progression = main_lift_setup()
        workout = make_workout(
            "w-1",
            "2024-01-10",
            [
                logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 5]),
                logged_exercise(BENCH_TEMPLATE, weight=45, reps=[10, 10, 10]),
                logged_exercise(ROW_TEMPLATE, weight=30, reps=[15, 15, 18]),
            ],
            routine_id="r-a1",
        )

        result = use_case.execute([workout], exercises, progression, ASSIGNMENT)

        assert result.success is True
        by_key = {c.progression_key: c for c in result.pending_changes}
        assert by_key["squat-T1"].new_weight == 105
        assert by_key["bench-T2"].new_weight == 47.5
        assert by_key["ex-row"].new_weight == 32.5
        assert result.processed_workout_ids == ["w-1"]
        assert result.last_processed_workout_id == "w-1"

    def test_every_workout_yields_a_change(self, use_case):
        """Two workouts touching the same key each produce a change, oldest first."""
        exercises, progression = main_lift_setup()
        workouts = [
            make_workout(
                "w-2",
                "2024-01-17",
                [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 2, 2, 2])],
                "r-a1",
            ),
            make_workout(
                "w-1",
                "2024-01-10",
                [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 3])],
                "r-a1",
            ),
        ]

        result = use_case.execute(workouts, exercises, progression, ASSIGNMENT)

        assert [(c.workout_id, c.type) for c in result.pending_changes] == [
            ("w-1", ChangeType.PROGRESS),
            ("w-2", ChangeType.STAGE_CHANGE),
        ]
        assert result.processed_workout_ids == ["w-1", "w-2"]

    def test_batch_recorded_in_full(self, use_case):
        """Every session of a batch reaches history; the latest sets the state."""
        exercises, progression = main_lift_setup()
        workouts = [
            make_workout(
                "w-1",
                "2024-01-10",
                [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 3])],
                "r-a1",
            ),
            make_workout(
                "w-2",
                "2024-01-17",
                [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 2, 2, 2])],
                "r-a1",
            ),
        ]

        result = use_case.execute(workouts, exercises, progression, ASSIGNMENT)
        history = record_multiple_changes({}, result.pending_changes, exercises)
        updated = apply_all_pending_changes(progression, result.pending_changes)

        assert [e.workout_id for e in history["squat-T1"].entries] == ["w-1", "w-2"]
        assert result.last_processed_workout_id == "w-2"
        assert updated["squat-T1"].stage == 1
        assert updated["squat-T1"].last_workout_id == "w-2"

    def test_mixed_date_forms(self, use_case):
        """Date-only and UTC timestamps in one batch sort and sync without error."""
        exercises, progression = main_lift_setup()
        workouts = [
            LoggedWorkout(
                id="w-2",
                routine_id="r-a1",
                start_time="2024-01-15T09:00:00Z",
                exercises=[logged_exercise(SQUAT_TEMPLATE, weight=107.5)],
            ),
            LoggedWorkout(
                id="w-1",
                routine_id="r-a1",
                start_time="2024-01-10",
                exercises=[logged_exercise(SQUAT_TEMPLATE, weight=102.5)],
            ),
        ]

        result = use_case.execute(workouts, exercises, progression, ASSIGNMENT)

        assert result.success is True
        assert result.processed_workout_ids == ["w-1", "w-2"]
        (report,) = result.discrepancies
        assert report.workout_id == "w-2"

    def test_discrepancies_deduplicated(self, use_case):
        """Repeated mismatches on one exercise/tier are reported once."""
        exercises, progression = main_lift_setup()
        workouts = [
            make_workout("w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=102.5)], "r-a1"),
            make_workout("w-2", "2024-01-15", [logged_exercise(SQUAT_TEMPLATE, weight=107.5)], "r-a1"),
        ]

        result = use_case.execute(workouts, exercises, progression, ASSIGNMENT)

        (report,) = result.discrepancies
        assert report.workout_id == "w-2"
        assert report.actual_weight == 107.5

    def test_already_processed_skipped(self, use_case):
        """Workouts up to the marker are not analysed again."""
        exercises, progression = main_lift_setup()
        workouts = [
            make_workout("w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE)], "r-a1"),
            make_workout("w-2", "2024-01-12", [logged_exercise(BENCH_TEMPLATE, weight=60)], "r-a2"),
        ]

        result = use_case.execute(
            workouts, exercises, progression, ASSIGNMENT, last_processed_workout_id="w-1"
        )

        assert result.processed_workout_ids == ["w-2"]
        assert [c.progression_key for c in result.pending_changes] == ["bench-T1"]

    def test_unit_from_settings(self):
        """Without an explicit unit the configured one is used."""
        exercises, progression = main_lift_setup()
        use_case = SyncWorkoutsUseCase(
            settings=Settings(environment="test", weight_unit="lbs", _env_file=None)
        )
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100)], "r-a1"
        )

        result = use_case.execute([workout], exercises, progression, ASSIGNMENT)

        assert result.pending_changes[0].new_weight == 110

    def test_explicit_unit_overrides_settings(self, use_case):
        """An explicit unit wins over settings."""
        exercises, progression = main_lift_setup()
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100)], "r-a1"
        )

        result = use_case.execute(
            [workout], exercises, progression, ASSIGNMENT, unit=WeightUnit.LBS
        )

        assert result.pending_changes[0].new_weight == 110

    def test_replay_is_idempotent(self, use_case):
        """Syncing and recording the same batch twice changes nothing the second time."""
        exercises, progression = main_lift_setup()
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100)], "r-a1"
        )

        first = use_case.execute([workout], exercises, progression, ASSIGNMENT)
        history = record_multiple_changes({}, first.pending_changes, exercises)
        updated = apply_all_pending_changes(progression, first.pending_changes)

        second = use_case.execute([workout], exercises, progression, ASSIGNMENT)
        replayed = record_multiple_changes(history, second.pending_changes, exercises)

        assert replayed == history
        assert updated["squat-T1"].current_weight == 105
        assert updated["squat-T2"] == progression["squat-T2"]

    def test_empty_batch(self, use_case):
        """No workouts, no changes."""
        exercises, progression = main_lift_setup()

        result = use_case.execute([], exercises, progression, ASSIGNMENT)

        assert result.success is True
        assert result.pending_changes == []
        assert result.last_processed_workout_id is None
