"""
Domain layer for the GZCLP progression engine.

This package contains pure domain models that are independent of
infrastructure concerns (storage, network, presentation).
"""

from domain.models import (
    ExerciseConfig,
    ExerciseHistory,
    LoggedWorkout,
    PendingChange,
    ProgressionState,
    Tier,
)

__all__ = [
    "ExerciseConfig",
    "ExerciseHistory",
    "LoggedWorkout",
    "PendingChange",
    "ProgressionState",
    "Tier",
]
