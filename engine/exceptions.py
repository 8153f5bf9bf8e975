"""
Engine exceptions.

Logged workout data never raises: unmatched exercises, short sets and
missing reps degrade into documented results. These exceptions are reserved
for caller errors, such as asking the rules for a tier or stage that does
not exist.
"""


class EngineError(Exception):
    """Base class for engine errors."""

    pass


class UnknownTierError(EngineError):
    """Raised when a value is not one of T1, T2 or T3."""

    def __init__(self, tier: object):
        self.tier = tier
        super().__init__(f"Unknown tier: {tier!r}")


class InvalidStageError(EngineError):
    """Raised when a stage is outside the 0..2 ladder."""

    def __init__(self, stage: object):
        self.stage = stage
        super().__init__(f"Invalid stage: {stage!r} (expected 0, 1 or 2)")
