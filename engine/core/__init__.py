"""
Core engine functions.

Usage:
    from engine.core import analyze_workout, create_pending_changes_from_analysis

    results = analyze_workout(workout, exercises, progression, day=GZCLPDay.A1)
    changes = create_pending_changes_from_analysis(results, exercises, progression, WeightUnit.KG)
    progression = apply_all_pending_changes(progression, approved)
"""

from engine.core.apply_changes import apply_all_pending_changes, apply_pending_change
from engine.core.history_importer import HistoryImportResult, import_progression_history
from engine.core.history_recorder import (
    create_history_entry_from_change,
    record_multiple_changes,
    record_progression_history,
)
from engine.core.import_analysis import (
    ImportAnalysis,
    ProgressionSuggestion,
    WorkoutPerformance,
    analyze_exercise_for_import,
    analyze_exercise_performance,
    calculate_import_progression,
    find_most_recent_workout_for_exercise,
)
from engine.core.pending_changes import (
    create_pending_change,
    create_pending_changes_from_analysis,
    modify_pending_change_weight,
)
from engine.core.program_builder import ProgramBuildResult, build_program_from_import
from engine.core.progression import (
    ProgressionResult,
    calculate_deload,
    calculate_progression,
    get_amrap_reps,
    get_increment,
    get_rep_scheme,
    is_success,
    round_weight,
)
from engine.core.reconciliation import (
    deduplicate_discrepancies,
    deduplicate_pending_changes,
    keep_most_recent,
)
from engine.core.roles import (
    get_muscle_group,
    get_progression_key,
    get_role_for_slot,
    get_tier_for_day,
    next_day,
)
from engine.core.routine_importer import extract_from_routines
from engine.core.stage_detector import StageDetectionResult, detect_stage, extract_weight
from engine.core.workout_analysis import (
    WorkoutAnalysisResult,
    analyze_workout,
    collect_discrepancies,
    extract_reps_from_sets,
    extract_working_weight,
    filter_new_workouts,
    match_workout_to_exercises,
    sort_workouts_chronologically,
)

__all__ = [
    # Progression rules
    "ProgressionResult",
    "calculate_progression",
    "calculate_deload",
    "get_amrap_reps",
    "get_increment",
    "get_rep_scheme",
    "is_success",
    "round_weight",
    # Roles
    "get_muscle_group",
    "get_progression_key",
    "get_role_for_slot",
    "get_tier_for_day",
    "next_day",
    # Workout analysis
    "WorkoutAnalysisResult",
    "analyze_workout",
    "collect_discrepancies",
    "extract_reps_from_sets",
    "extract_working_weight",
    "filter_new_workouts",
    "match_workout_to_exercises",
    "sort_workouts_chronologically",
    # Pending changes
    "create_pending_change",
    "create_pending_changes_from_analysis",
    "modify_pending_change_weight",
    "apply_pending_change",
    "apply_all_pending_changes",
    # History
    "create_history_entry_from_change",
    "record_progression_history",
    "record_multiple_changes",
    "HistoryImportResult",
    "import_progression_history",
    # Reconciliation
    "keep_most_recent",
    "deduplicate_discrepancies",
    "deduplicate_pending_changes",
    # Import
    "StageDetectionResult",
    "detect_stage",
    "extract_weight",
    "extract_from_routines",
    "ImportAnalysis",
    "ProgressionSuggestion",
    "WorkoutPerformance",
    "analyze_exercise_for_import",
    "analyze_exercise_performance",
    "calculate_import_progression",
    "find_most_recent_workout_for_exercise",
    "ProgramBuildResult",
    "build_program_from_import",
]
