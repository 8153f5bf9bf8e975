"""
GZCLP program constants.

Fixed tables for rep schemes, stage detection patterns, weight increments
and the default day/tier rotation. None of these are configurable at
runtime.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from domain.models import (
    DayAssignment,
    ExerciseRole,
    GZCLPDay,
    MuscleGroup,
    Tier,
    TierTable,
    WeightUnit,
)


# =============================================================================
# Rep Schemes
# =============================================================================


@dataclass(frozen=True)
class RepScheme:
    """One row of the rep-scheme table."""

    sets: int
    reps: int
    amrap: bool
    display: str


T1_SCHEMES: Dict[int, RepScheme] = {
    0: RepScheme(sets=5, reps=3, amrap=True, display="5x3+"),
    1: RepScheme(sets=6, reps=2, amrap=True, display="6x2+"),
    2: RepScheme(sets=10, reps=1, amrap=True, display="10x1+"),
}

T2_SCHEMES: Dict[int, RepScheme] = {
    0: RepScheme(sets=3, reps=10, amrap=False, display="3x10"),
    1: RepScheme(sets=3, reps=8, amrap=False, display="3x8"),
    2: RepScheme(sets=3, reps=6, amrap=False, display="3x6"),
}

T3_SCHEME = RepScheme(sets=3, reps=15, amrap=True, display="3x15+")

# T3 has no ladder: every stage reads the same row.
REP_SCHEMES: Dict[Tier, Dict[int, RepScheme]] = {
    Tier.T1: T1_SCHEMES,
    Tier.T2: T2_SCHEMES,
    Tier.T3: {0: T3_SCHEME, 1: T3_SCHEME, 2: T3_SCHEME},
}

MAX_STAGE = 2


# =============================================================================
# Stage Detection Patterns (import)
# =============================================================================

# (set count, rep count) -> stage
STAGE_PATTERNS: Dict[Tier, Tuple[Tuple[int, int, int], ...]] = {
    Tier.T1: ((5, 3, 0), (6, 2, 1), (10, 1, 2)),
    Tier.T2: ((3, 10, 0), (3, 8, 1), (3, 6, 2)),
}


# =============================================================================
# Weights
# =============================================================================

# kg and lbs increments are defined independently, not converted.
WEIGHT_INCREMENTS: Dict[WeightUnit, Dict[MuscleGroup, float]] = {
    WeightUnit.KG: {MuscleGroup.UPPER: 2.5, MuscleGroup.LOWER: 5.0},
    WeightUnit.LBS: {MuscleGroup.UPPER: 5.0, MuscleGroup.LOWER: 10.0},
}

DELOAD_PERCENTAGE = 0.85

WEIGHT_ROUNDING: Dict[WeightUnit, float] = {
    WeightUnit.KG: 2.5,
    WeightUnit.LBS: 5.0,
}

LOWER_BODY_ROLES = frozenset({ExerciseRole.SQUAT, ExerciseRole.DEADLIFT})


# =============================================================================
# Days
# =============================================================================

DAY_CYCLE: Dict[GZCLPDay, GZCLPDay] = {
    GZCLPDay.A1: GZCLPDay.B1,
    GZCLPDay.B1: GZCLPDay.A2,
    GZCLPDay.A2: GZCLPDay.B2,
    GZCLPDay.B2: GZCLPDay.A1,
}

DEFAULT_TIER_TABLE: TierTable = {
    GZCLPDay.A1: DayAssignment(t1=ExerciseRole.SQUAT, t2=ExerciseRole.BENCH),
    GZCLPDay.B1: DayAssignment(t1=ExerciseRole.OHP, t2=ExerciseRole.DEADLIFT),
    GZCLPDay.A2: DayAssignment(t1=ExerciseRole.BENCH, t2=ExerciseRole.SQUAT),
    GZCLPDay.B2: DayAssignment(t1=ExerciseRole.DEADLIFT, t2=ExerciseRole.OHP),
}
