"""
Tier progression rules.

This module implements the GZCLP stage/weight state machine:
- Success evaluation against the tier's rep-scheme table
- Weight increments by muscle group and unit
- Stage advancement on failure at stage 0/1
- Deload to 85% on failure at stage 2
- AMRAP record tracking

T1, T2 and T3 share one evaluator parameterized by the rep-scheme row.
All functions are pure.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from domain.models import (
    ChangeType,
    MuscleGroup,
    ProgressionState,
    Stage,
    Tier,
    WeightUnit,
)
from engine.core.constants import (
    DELOAD_PERCENTAGE,
    MAX_STAGE,
    REP_SCHEMES,
    WEIGHT_INCREMENTS,
    WEIGHT_ROUNDING,
    RepScheme,
)
from engine.exceptions import InvalidStageError, UnknownTierError


# =============================================================================
# Table Lookups
# =============================================================================


def coerce_tier(tier: Union[Tier, str]) -> Tier:
    """Accept a Tier or its string value."""
    try:
        return Tier(tier)
    except ValueError:
        raise UnknownTierError(tier) from None


def get_rep_scheme(tier: Union[Tier, str], stage: int) -> RepScheme:
    """
    Get the prescribed rep scheme for a tier and stage.

    T3 returns its single fixed scheme for every stage.

    Raises:
        UnknownTierError: tier is not T1, T2 or T3
        InvalidStageError: stage is outside 0..2
    """
    schemes = REP_SCHEMES[coerce_tier(tier)]
    if stage not in schemes:
        raise InvalidStageError(stage)
    return schemes[stage]


# =============================================================================
# Weight Utilities
# =============================================================================


def round_weight(weight: float, unit: WeightUnit) -> float:
    """
    Round weight to the nearest plate increment for the unit (half rounds up).

    Args:
        weight: Weight to round
        unit: Active unit (2.5 for kg, 5 for lbs)

    Returns:
        Rounded weight
    """
    increment = WEIGHT_ROUNDING[WeightUnit(unit)]
    return _clean(math.floor(weight / increment + 0.5) * increment)


def calculate_deload(weight: float, unit: WeightUnit) -> float:
    """Deloaded weight: 85% of ``weight`` rounded to the unit increment."""
    return round_weight(weight * DELOAD_PERCENTAGE, unit)


def get_increment(muscle_group: MuscleGroup, unit: WeightUnit) -> float:
    """
    Weight increment for a successful session.

    kg: 2.5 upper / 5 lower. lbs: 5 upper / 10 lower.
    """
    return WEIGHT_INCREMENTS[WeightUnit(unit)][MuscleGroup(muscle_group)]


def _clean(weight: float) -> float:
    # Strip float noise from repeated increments (e.g. 102.50000000000001).
    return round(weight, 2)


# =============================================================================
# Success Evaluation
# =============================================================================


def is_success(reps: Sequence[int], tier: Union[Tier, str], stage: int) -> bool:
    """
    Check whether the prescribed sets were all completed.

    Takes exactly the first N entries (N = prescribed set count). Fewer than
    N entries is a failure; each of the N must reach the target reps. Extra
    entries beyond N are ignored.
    """
    scheme = get_rep_scheme(tier, stage)
    if len(reps) < scheme.sets:
        return False
    return all(r >= scheme.reps for r in reps[: scheme.sets])


def get_amrap_reps(reps: Sequence[int], tier: Union[Tier, str], stage: int) -> Optional[int]:
    """
    Rep count of the AMRAP set (the last prescribed set).

    Returns None for schemes without an AMRAP set (T2) and 0 when the
    AMRAP set was not logged.
    """
    scheme = get_rep_scheme(tier, stage)
    if not scheme.amrap:
        return None
    index = scheme.sets - 1
    return reps[index] if index < len(reps) else 0


# =============================================================================
# Progression Result
# =============================================================================


@dataclass(frozen=True)
class ProgressionResult:
    """Outcome of applying the rules to one session."""

    type: ChangeType
    new_weight: float
    new_stage: Stage
    new_scheme: str
    reason: str
    success: bool
    new_base_weight: Optional[float] = None
    amrap_reps: Optional[int] = None
    new_amrap_record: Optional[int] = None

    @property
    def is_new_record(self) -> bool:
        return self.new_amrap_record is not None


def _fmt(weight: float, unit: WeightUnit) -> str:
    return f"{weight:g}{WeightUnit(unit).value}"


def calculate_progression(
    tier: Union[Tier, str],
    current: ProgressionState,
    reps: Sequence[int],
    muscle_group: MuscleGroup,
    unit: WeightUnit,
) -> ProgressionResult:
    """
    Calculate the next state for one session.

    - Success: weight += increment(muscle group, unit), stage unchanged.
    - Failure at stage 0/1 (T1/T2): stage + 1, weight unchanged.
    - Failure at stage 2 (T1/T2): deload to 85%, stage 0, new base weight.
    - Failure (T3): repeat the same weight; T3 has no ladder.

    Args:
        tier: Tier the lift was trained at
        current: Progression state the session was performed against
        reps: Achieved reps per working set, in order
        muscle_group: Muscle-group classification of the lift
        unit: Active weight unit

    Returns:
        ProgressionResult describing the proposed change
    """
    tier = coerce_tier(tier)
    stage: Stage = current.stage if tier != Tier.T3 else 0
    scheme = get_rep_scheme(tier, stage)
    weight = current.current_weight
    success = is_success(reps, tier, stage)

    amrap_reps = get_amrap_reps(reps, tier, stage)
    new_amrap_record = None
    if amrap_reps is not None and amrap_reps > current.amrap_record:
        new_amrap_record = amrap_reps

    common = dict(amrap_reps=amrap_reps, new_amrap_record=new_amrap_record)

    if success:
        increment = get_increment(muscle_group, unit)
        return ProgressionResult(
            type=ChangeType.PROGRESS,
            new_weight=_clean(weight + increment),
            new_stage=stage,
            new_scheme=scheme.display,
            reason=(
                f"All sets hit target: completed {scheme.display} at {_fmt(weight, unit)}. "
                f"Adding {_fmt(increment, unit)}."
            ),
            success=True,
            **common,
        )

    if tier == Tier.T3:
        return ProgressionResult(
            type=ChangeType.REPEAT,
            new_weight=weight,
            new_stage=0,
            new_scheme=scheme.display,
            reason=(
                f"Missed {scheme.display} at {_fmt(weight, unit)}. "
                f"Repeating the same weight."
            ),
            success=False,
            **common,
        )

    if stage < MAX_STAGE:
        next_stage: Stage = stage + 1
        next_scheme = get_rep_scheme(tier, next_stage)
        return ProgressionResult(
            type=ChangeType.STAGE_CHANGE,
            new_weight=weight,
            new_stage=next_stage,
            new_scheme=next_scheme.display,
            reason=(
                f"Failed to complete {scheme.display} at {_fmt(weight, unit)}. "
                f"Moving to {next_scheme.display}."
            ),
            success=False,
            **common,
        )

    deload_weight = calculate_deload(weight, unit)
    restart_scheme = get_rep_scheme(tier, 0)
    return ProgressionResult(
        type=ChangeType.DELOAD,
        new_weight=deload_weight,
        new_stage=0,
        new_scheme=restart_scheme.display,
        new_base_weight=deload_weight,
        reason=(
            f"Failed {scheme.display} at {_fmt(weight, unit)}. "
            f"Deloading to {_fmt(deload_weight, unit)} and restarting at {restart_scheme.display}."
        ),
        success=False,
        **common,
    )
