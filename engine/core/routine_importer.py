"""
Routine importer.

Extracts a starting program from routines the user already authored. Each
assigned day routine is read positionally:

- position 0 -> the day's T1 lift
- position 1 -> the day's T2 lift
- positions 2+ -> T3 accessories

Detected stages and weights are proposals. Anything that could not be
determined is reported as a warning for the user to resolve; warnings never
stop the import.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Mapping, Optional

from domain.models import (
    ExerciseRole,
    GZCLPDay,
    ImportedExercise,
    ImportResult,
    ImportWarning,
    ImportWarningType,
    Routine,
    RoutineAssignment,
    RoutineExercise,
    StageConfidence,
    Tier,
    TierTable,
)
from engine.core.roles import get_role_for_slot
from engine.core.stage_detector import describe_scheme, detect_stage, extract_weight

logger = logging.getLogger(__name__)


def extract_exercise(
    exercise: RoutineExercise,
    day: GZCLPDay,
    tier: Tier,
    role: ExerciseRole,
    warnings: List[ImportWarning],
) -> ImportedExercise:
    """Detect stage and weight for one routine exercise, appending warnings."""
    detection = detect_stage(exercise.sets, tier)
    weight = extract_weight(exercise.sets)

    if detection is None:
        warnings.append(
            ImportWarning(
                type=ImportWarningType.STAGE_UNKNOWN,
                message=f"{exercise.title}: could not detect stage. Please select manually.",
                day=day,
            )
        )

    if not weight:
        warnings.append(
            ImportWarning(
                type=ImportWarningType.WEIGHT_NULL,
                message=f"{exercise.title}: no weight found. Set to 0.",
                day=day,
            )
        )

    return ImportedExercise(
        day=day,
        tier=tier,
        role=role,
        template_id=exercise.template_id,
        name=exercise.title,
        detected_weight=weight,
        detected_stage=detection.stage if detection else None,
        stage_confidence=detection.confidence if detection else StageConfidence.MANUAL,
        original_set_count=len(exercise.normal_sets),
        original_rep_scheme=detection.rep_scheme if detection else describe_scheme(exercise.sets),
    )


def extract_day_exercises(
    day: GZCLPDay,
    routine: Routine,
    warnings: List[ImportWarning],
    tier_table: Optional[TierTable] = None,
) -> List[ImportedExercise]:
    """Map one day's routine onto its T1, T2 and T3 slots."""
    imported: List[ImportedExercise] = []
    exercises = routine.exercises

    for position, tier in enumerate((Tier.T1, Tier.T2)):
        if position < len(exercises):
            role = get_role_for_slot(day, tier, tier_table)
            imported.append(extract_exercise(exercises[position], day, tier, role, warnings))
        elif tier == Tier.T2:
            warnings.append(
                ImportWarning(
                    type=ImportWarningType.NO_T2,
                    message=(
                        f"{day.value}: no T2 exercise found. "
                        f"Only {len(exercises)} exercise(s) in routine."
                    ),
                    day=day,
                )
            )

    for exercise in exercises[2:]:
        imported.append(extract_exercise(exercise, day, Tier.T3, ExerciseRole.T3, warnings))

    return imported


def find_duplicate_assignments(assignment: RoutineAssignment) -> List[ImportWarning]:
    """One warning per routine assigned to more than one day."""
    days_by_routine: Dict[str, List[GZCLPDay]] = defaultdict(list)
    for day, routine_id in assignment.assigned():
        days_by_routine[routine_id].append(day)

    return [
        ImportWarning(
            type=ImportWarningType.DUPLICATE_ROUTINE,
            message=(
                "Same routine selected for "
                f"{' and '.join(day.value for day in days)}."
            ),
        )
        for days in days_by_routine.values()
        if len(days) > 1
    ]


def extract_from_routines(
    routines: Mapping[str, Routine],
    assignment: RoutineAssignment,
    tier_table: Optional[TierTable] = None,
) -> ImportResult:
    """
    Extract exercises and progression state from assigned routines.

    Args:
        routines: Routines keyed by id
        assignment: Which routine is assigned to which day
        tier_table: Day -> T1/T2 assignment; defaults to the GZCLP rotation

    Returns:
        ImportResult with exercises in day order, warnings and the
        assignment used
    """
    warnings = find_duplicate_assignments(assignment)
    exercises: List[ImportedExercise] = []

    for day, routine_id in assignment.assigned():
        routine = routines.get(routine_id)
        if routine is None:
            logger.warning(f"Routine {routine_id} assigned to {day.value} was not provided")
            continue
        exercises.extend(extract_day_exercises(day, routine, warnings, tier_table))

    logger.info(
        f"Imported {len(exercises)} exercise(s) from {len(assignment.assigned())} "
        f"assigned day(s) with {len(warnings)} warning(s)"
    )

    return ImportResult(exercises=exercises, warnings=warnings, assignment=assignment)
