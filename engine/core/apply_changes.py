"""
Applying approved pending changes to stored progression.

Changes are folded in order: later changes in a batch see the state left by
earlier ones. Inputs are never mutated; a new mapping is returned.
"""

import logging
from functools import reduce
from typing import Dict, Iterable, Mapping

from domain.models import ChangeType, PendingChange, ProgressionState

logger = logging.getLogger(__name__)


def apply_pending_change(
    progression: Mapping[str, ProgressionState],
    change: PendingChange,
) -> Dict[str, ProgressionState]:
    """
    Apply a single change to the entry at its progression key.

    A missing key leaves the mapping unchanged. Base weight moves only on
    deload; the AMRAP record only when the change carries a higher one.
    """
    current = progression.get(change.progression_key)
    if current is None:
        logger.debug(
            f"Ignoring change {change.id}: progression key '{change.progression_key}' is gone"
        )
        return dict(progression)

    update = {
        "current_weight": change.new_weight,
        "stage": change.new_stage,
        "last_workout_id": change.workout_id,
        "last_workout_date": change.workout_date,
    }

    if change.type == ChangeType.DELOAD:
        update["base_weight"] = change.new_weight

    if change.new_amrap_record is not None and change.new_amrap_record > current.amrap_record:
        update["amrap_record"] = change.new_amrap_record
        update["amrap_record_date"] = change.workout_date
        update["amrap_record_workout_id"] = change.workout_id

    updated = dict(progression)
    updated[change.progression_key] = current.model_copy(update=update)
    return updated


def apply_all_pending_changes(
    progression: Mapping[str, ProgressionState],
    changes: Iterable[PendingChange],
) -> Dict[str, ProgressionState]:
    """Apply ``changes`` in order."""
    return reduce(apply_pending_change, changes, dict(progression))
