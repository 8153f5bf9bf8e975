"""
Program builder.

Materializes a reviewed ImportResult into configured exercises and initial
progression state. One exercise is created per distinct template id (a main
lift appears on two days, a shared T3 on several) and one progression entry
per progression key.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from domain.models import ExerciseConfig, ImportedExercise, ImportResult, ProgressionState
from engine.core.roles import get_progression_key

logger = logging.getLogger(__name__)


@dataclass
class ProgramBuildResult:
    exercises: Dict[str, ExerciseConfig] = field(default_factory=dict)
    progression: Dict[str, ProgressionState] = field(default_factory=dict)
    skipped: List[ImportedExercise] = field(default_factory=list)


def _generate_id() -> str:
    return str(uuid.uuid4())


def build_program_from_import(
    result: ImportResult,
    id_factory: Callable[[], str] = _generate_id,
) -> ProgramBuildResult:
    """
    Create exercises and progression entries from an import.

    Exercises whose stage is still unknown (no detection, no user choice)
    are skipped and returned in ``skipped``; the first occurrence of a
    progression key wins.
    """
    built = ProgramBuildResult()
    ids_by_template: Dict[str, str] = {}

    for imported in result.exercises:
        stage = imported.effective_stage
        if stage is None:
            built.skipped.append(imported)
            continue

        exercise_id = ids_by_template.get(imported.template_id)
        if exercise_id is None:
            exercise_id = id_factory()
            ids_by_template[imported.template_id] = exercise_id
            built.exercises[exercise_id] = ExerciseConfig(
                id=exercise_id,
                template_id=imported.template_id,
                name=imported.name,
                role=imported.role,
            )

        key = get_progression_key(exercise_id, imported.role, imported.tier)
        if key in built.progression:
            continue

        weight = imported.effective_weight
        built.progression[key] = ProgressionState(
            exercise_id=exercise_id,
            current_weight=weight,
            stage=stage,
            base_weight=weight,
        )

    if built.skipped:
        logger.warning(
            f"{len(built.skipped)} imported exercise(s) skipped without a stage: "
            f"{', '.join(e.name for e in built.skipped)}"
        )

    return built
