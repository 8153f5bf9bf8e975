"""
ImportRoutines Use Case.

Guided setup from routines the user already authored: extract a reviewable
ImportResult, then materialize the reviewed result into a program.
"""

import logging
from typing import Callable, Mapping, Optional

from domain.models import ImportResult, Routine, RoutineAssignment, TierTable
from engine.core.program_builder import ProgramBuildResult, build_program_from_import
from engine.core.routine_importer import extract_from_routines

logger = logging.getLogger(__name__)


class ImportRoutinesUseCase:
    """
    Use case for importing a starting program from routines.

    Usage:
        >>> use_case = ImportRoutinesUseCase()
        >>> result = use_case.execute(routines=routines, assignment=assignment)
        >>> reviewed = result.model_copy(update={"exercises": [...]})
        >>> program = use_case.materialize(reviewed)
    """

    def __init__(
        self,
        tier_table: Optional[TierTable] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._tier_table = tier_table
        self._id_factory = id_factory

    def execute(
        self,
        routines: Mapping[str, Routine],
        assignment: RoutineAssignment,
    ) -> ImportResult:
        """
        Extract exercises, detected stages/weights and warnings.

        Args:
            routines: Routines keyed by id
            assignment: Which routine is assigned to which day

        Returns:
            ImportResult for user review
        """
        return extract_from_routines(routines, assignment, self._tier_table)

    def materialize(self, result: ImportResult) -> ProgramBuildResult:
        """Build exercises and initial progression from a reviewed result."""
        if self._id_factory is not None:
            built = build_program_from_import(result, self._id_factory)
        else:
            built = build_program_from_import(result)

        logger.info(
            f"Materialized {len(built.exercises)} exercise(s) and "
            f"{len(built.progression)} progression entries"
        )
        return built
