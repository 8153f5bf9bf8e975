"""
Role utilities.

Tier is derived from role + day rather than stored. Progression keys are a
tagged convention: "<role>-<tier>" for main lifts trained as T1/T2, the bare
exercise id for everything else.
"""

from typing import Optional

from domain.models import (
    MAIN_LIFT_ROLES,
    ExerciseRole,
    GZCLPDay,
    MuscleGroup,
    Tier,
    TierTable,
)
from engine.core.constants import DAY_CYCLE, DEFAULT_TIER_TABLE, LOWER_BODY_ROLES


def is_main_lift_role(role: Optional[ExerciseRole]) -> bool:
    return role in MAIN_LIFT_ROLES


def get_progression_key(
    exercise_id: str,
    role: Optional[ExerciseRole],
    tier: Tier,
) -> str:
    """
    Generate the progression storage key for an exercise.

    Examples:
        >>> get_progression_key("uuid-123", ExerciseRole.SQUAT, Tier.T1)
        'squat-T1'
        >>> get_progression_key("uuid-789", ExerciseRole.T3, Tier.T3)
        'uuid-789'
    """
    if is_main_lift_role(role) and tier in (Tier.T1, Tier.T2):
        return f"{role.value}-{tier.value}"
    return exercise_id


def get_tier_for_day(
    role: ExerciseRole,
    day: GZCLPDay,
    tier_table: Optional[TierTable] = None,
) -> Optional[Tier]:
    """
    Tier of ``role`` on ``day``.

    Returns None for a main lift that is not scheduled that day.
    """
    if role == ExerciseRole.T3:
        return Tier.T3
    table = tier_table if tier_table is not None else DEFAULT_TIER_TABLE
    assignment = table.get(day)
    if assignment is None:
        return None
    return assignment.tier_for(role)


def get_role_for_slot(
    day: GZCLPDay,
    tier: Tier,
    tier_table: Optional[TierTable] = None,
) -> ExerciseRole:
    """Role that fills the T1/T2 slot of ``day``; T3 slots map to the T3 role."""
    if tier == Tier.T3:
        return ExerciseRole.T3
    table = tier_table if tier_table is not None else DEFAULT_TIER_TABLE
    assignment = table[day]
    return assignment.t1 if tier == Tier.T1 else assignment.t2


def get_muscle_group(role: Optional[ExerciseRole]) -> MuscleGroup:
    """Squat and deadlift are lower body; everything else is upper body."""
    if role in LOWER_BODY_ROLES:
        return MuscleGroup.LOWER
    return MuscleGroup.UPPER


def next_day(day: GZCLPDay) -> GZCLPDay:
    return DAY_CYCLE[day]
