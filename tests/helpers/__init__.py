"""
Test builders for engine tests.

Usage:
    from tests.helpers import make_workout, logged_exercise, main_lift_setup

    workout = make_workout("w-1", "2024-01-10", [logged_exercise("SQ", weight=100, reps=[3, 3, 3, 3, 5])])
"""

from tests.helpers.builders import (
    BENCH_TEMPLATE,
    CURL_TEMPLATE,
    DEADLIFT_TEMPLATE,
    OHP_TEMPLATE,
    ROW_TEMPLATE,
    SQUAT_TEMPLATE,
    at,
    logged_exercise,
    main_lift_setup,
    make_change,
    make_discrepancy,
    make_state,
    make_workout,
    routine_exercise,
)

__all__ = [
    "BENCH_TEMPLATE",
    "CURL_TEMPLATE",
    "DEADLIFT_TEMPLATE",
    "OHP_TEMPLATE",
    "ROW_TEMPLATE",
    "SQUAT_TEMPLATE",
    "at",
    "logged_exercise",
    "main_lift_setup",
    "make_change",
    "make_discrepancy",
    "make_state",
    "make_workout",
    "routine_exercise",
]
