"""
Stage detection for routine import.

Classifies an authored exercise's working-set structure against the fixed
GZCLP stage patterns. An unrecognized structure is reported as None, never
guessed.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from domain.models import RoutineSet, SetType, Stage, StageConfidence, Tier
from engine.core.constants import STAGE_PATTERNS, T3_SCHEME
from engine.core.progression import coerce_tier, get_rep_scheme


@dataclass(frozen=True)
class StageDetectionResult:
    stage: Stage
    confidence: StageConfidence
    set_count: int
    rep_scheme: str


def filter_normal_sets(sets: Iterable[RoutineSet]) -> List[RoutineSet]:
    return [s for s in sets if s.type == SetType.NORMAL]


def get_mode(values: Iterable[float], prefer_higher: bool = False) -> float:
    """
    Most common value, 0 for no values.

    Ties go to the first-seen value, or to the highest when
    ``prefer_higher`` is set.
    """
    counts = Counter(values)
    if not counts:
        return 0
    top = max(counts.values())
    tied = [value for value, count in counts.items() if count == top]
    return max(tied) if prefer_higher else tied[0]


def detect_stage(
    sets: Iterable[RoutineSet],
    tier: Union[Tier, str],
) -> Optional[StageDetectionResult]:
    """
    Detect the stage encoded by a routine exercise's sets.

    Only normal sets are considered. T3 is always stage 0.

    Examples:
        >>> sets = [RoutineSet(weight=100, reps=3)] * 5
        >>> detect_stage(sets, Tier.T1).stage
        0
        >>> detect_stage([RoutineSet(weight=60, reps=4)] * 4, Tier.T1) is None
        True

    Returns:
        StageDetectionResult with HIGH confidence, or None when there are no
        working sets or no pattern matches
    """
    tier = coerce_tier(tier)
    normal = filter_normal_sets(sets)
    if not normal:
        return None

    set_count = len(normal)

    if tier == Tier.T3:
        return StageDetectionResult(
            stage=0,
            confidence=StageConfidence.HIGH,
            set_count=set_count,
            rep_scheme=T3_SCHEME.display,
        )

    modal_reps = get_mode(s.reps if s.reps is not None else 0 for s in normal)

    for pattern_sets, pattern_reps, stage in STAGE_PATTERNS[tier]:
        if set_count == pattern_sets and modal_reps == pattern_reps:
            return StageDetectionResult(
                stage=stage,
                confidence=StageConfidence.HIGH,
                set_count=set_count,
                rep_scheme=get_rep_scheme(tier, stage).display,
            )

    return None


def extract_weight(sets: Iterable[RoutineSet]) -> float:
    """
    Representative working weight: the modal weight of normal sets.

    Ties resolve toward the heavier weight. Returns 0 when no normal set
    carries a weight; callers treat that as a warning.
    """
    weights = [s.weight for s in filter_normal_sets(sets) if s.weight is not None]
    return get_mode(weights, prefer_higher=True)


def describe_scheme(sets: Iterable[RoutineSet]) -> str:
    """Label such as "4x4" for a set structure, from normal sets only."""
    normal = filter_normal_sets(sets)
    modal_reps = get_mode(s.reps if s.reps is not None else 0 for s in normal)
    return f"{len(normal)}x{modal_reps:g}"
