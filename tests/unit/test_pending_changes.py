"""
Unit tests for engine/core/pending_changes.py

Tests cover:
- Building changes from analysis results
- Tier prefixes, summary fields and PR flags
- Discrepant weights and skipped results
- Tier independence within one workout
- User weight modification
"""

import logging

import pytest

from domain.models import ChangeType, GZCLPDay, Tier, WeightUnit
from engine.core.pending_changes import (
    create_pending_changes_from_analysis,
    modify_pending_change_weight,
)
from engine.core.workout_analysis import analyze_workout
from tests.helpers import (
    BENCH_TEMPLATE,
    ROW_TEMPLATE,
    SQUAT_TEMPLATE,
    logged_exercise,
    main_lift_setup,
    make_change,
    make_state,
    make_workout,
)


def _changes_for(workout, day, progression=None, unit=WeightUnit.KG):
    exercises, default_progression = main_lift_setup()
    progression = default_progression if progression is None else progression
    results = analyze_workout(workout, exercises, progression, day=day)
    return create_pending_changes_from_analysis(
        results, exercises, progression, unit, id_factory=lambda: "chg-1"
    )


@pytest.mark.unit
class TestCreatePendingChangesFromAnalysis:
    """Tests for create_pending_changes_from_analysis."""

    def test_t1_squat_progress_scenario(self):
        """Stage-0 T1 squat at 100 kg, reps [3,3,3,3,5] proposes 105 kg."""
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 5])]
        )

        (change,) = _changes_for(workout, GZCLPDay.A1)

        assert change.type == ChangeType.PROGRESS
        assert change.new_weight == 105
        assert change.current_weight == 100
        assert change.progression_key == "squat-T1"
        assert change.id == "chg-1"

    def test_stage_2_deload_scenario(self):
        """Stage-2 T1 at 100 kg failing one single deloads to 85 kg."""
        _, progression = main_lift_setup()
        progression["squat-T1"] = make_state(100, stage=2)
        workout = make_workout(
            "w-1",
            "2024-01-10",
            [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[1, 1, 1, 0, 1, 1, 1, 1, 1, 1])],
        )

        (change,) = _changes_for(workout, GZCLPDay.A1, progression)

        assert change.type == ChangeType.DELOAD
        assert change.new_weight == 85
        assert change.new_stage == 0
        assert change.current_stage == 2

    def test_main_lift_name_has_tier_prefix(self):
        """Main lifts are labelled with their tier; T3 keeps its name."""
        workout = make_workout(
            "w-1",
            "2024-01-10",
            [
                logged_exercise(SQUAT_TEMPLATE, weight=100),
                logged_exercise(ROW_TEMPLATE, weight=30, reps=[15, 15, 15]),
            ],
        )

        squat, row = _changes_for(workout, GZCLPDay.A1)

        assert squat.exercise_name == "T1 Squat"
        assert row.exercise_name == "Cable Row"

    def test_summary_fields(self):
        """Sets completed/target and the workout identity are carried."""
        workout = make_workout(
            "w-7", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3])]
        )

        (change,) = _changes_for(workout, GZCLPDay.A1)

        assert change.sets_completed == 3
        assert change.sets_target == 5
        assert change.workout_id == "w-7"
        assert change.workout_date == workout.start_time
        assert change.day == GZCLPDay.A1
        assert change.type == ChangeType.STAGE_CHANGE

    def test_new_pr_flag(self):
        """A better AMRAP than stored is flagged as a PR."""
        _, progression = main_lift_setup()
        progression["squat-T1"] = make_state(100, amrap_record=5)
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 9])]
        )

        (change,) = _changes_for(workout, GZCLPDay.A1, progression)

        assert change.amrap_reps == 9
        assert change.new_pr is True
        assert change.new_amrap_record == 9

    def test_discrepancy_uses_logged_weight(self):
        """Rules run on the weight actually lifted; the stored weight is kept for reference."""
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE, weight=110, reps=[3, 3, 3, 3, 3])]
        )

        (change,) = _changes_for(workout, GZCLPDay.A1)

        assert change.current_weight == 100
        assert change.new_weight == 115
        assert change.discrepancy.actual_weight == 110

    def test_missing_progression_skipped(self, caplog):
        """A result without stored progression is skipped with a warning."""
        workout = make_workout("w-1", "2024-01-10", [logged_exercise(SQUAT_TEMPLATE)])

        with caplog.at_level(logging.WARNING, logger="engine"):
            changes = _changes_for(workout, GZCLPDay.A1, progression={})

        assert changes == []
        assert "squat-T1" in caplog.text

    def test_tiers_do_not_cross_influence(self):
        """T1 and T2 changes in one workout are computed independently."""
        workout = make_workout(
            "w-1",
            "2024-01-10",
            [
                logged_exercise(SQUAT_TEMPLATE, weight=100, reps=[3, 3, 3, 3, 3]),
                logged_exercise(BENCH_TEMPLATE, weight=45, reps=[10, 9, 8]),
            ],
        )

        squat, bench = _changes_for(workout, GZCLPDay.A1)

        assert (squat.progression_key, squat.type, squat.new_weight) == (
            "squat-T1",
            ChangeType.PROGRESS,
            105,
        )
        assert (bench.progression_key, bench.type, bench.new_weight, bench.new_stage) == (
            "bench-T2",
            ChangeType.STAGE_CHANGE,
            45,
            1,
        )

    def test_lbs_increments(self):
        """The active unit selects the increment table."""
        _, progression = main_lift_setup()
        progression["bench-T2"] = make_state(95, exercise_id="ex-bench")
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(BENCH_TEMPLATE, weight=95, reps=[10, 10, 10])]
        )

        (change,) = _changes_for(workout, GZCLPDay.A1, progression, unit=WeightUnit.LBS)

        assert change.new_weight == 100
        assert change.tier == Tier.T2

    def test_t3_failure_is_repeat(self):
        """A missed T3 proposes the same weight."""
        workout = make_workout(
            "w-1", "2024-01-10", [logged_exercise(ROW_TEMPLATE, weight=30, reps=[15, 14, 12])]
        )

        (change,) = _changes_for(workout, GZCLPDay.B1)

        assert change.type == ChangeType.REPEAT
        assert change.new_weight == 30


@pytest.mark.unit
class TestModifyPendingChangeWeight:
    """Tests for modify_pending_change_weight."""

    def test_weight_and_reason_updated(self):
        """The user's weight replaces the suggestion, noted in the reason."""
        change = make_change(current_weight=100, new_weight=105)

        modified = modify_pending_change_weight(change, 102.5)

        assert modified.new_weight == 102.5
        assert "original suggestion: 105" in modified.reason
        assert change.new_weight == 105

    def test_identity_preserved(self):
        """Everything else is unchanged."""
        change = make_change()

        modified = modify_pending_change_weight(change, 110)

        assert modified.id == change.id
        assert modified.progression_key == change.progression_key
        assert modified.type == change.type
