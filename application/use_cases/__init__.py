"""
Application use cases for the GZCLP progression engine.

Use cases are the entry points for business operations. They compose the
pure engine functions and return plain results; persistence and
presentation stay with the caller.

Usage:
    from application.use_cases import SyncWorkoutsUseCase, ImportRoutinesUseCase

    sync = SyncWorkoutsUseCase()
    result = sync.execute(
        workouts=workouts,
        exercises=exercises,
        progression=progression,
        assignment=assignment,
    )

    importer = ImportRoutinesUseCase()
    imported = importer.execute(routines=routines, assignment=assignment)
    program = importer.materialize(imported)
"""

from application.use_cases.import_routines import ImportRoutinesUseCase
from application.use_cases.sync_workouts import SyncWorkoutsResult, SyncWorkoutsUseCase

__all__ = [
    # SyncWorkouts
    "SyncWorkoutsUseCase",
    "SyncWorkoutsResult",
    # ImportRoutines
    "ImportRoutinesUseCase",
]
