"""
Datetime normalization shared by the dated models.

Workout logs send both ``"2024-01-10"`` and ``"2024-01-10T09:00:00Z"``.
pydantic parses the first as naive and the second as aware, and the two
cannot be compared. Every dated field goes through ``as_utc`` so all dates
in the engine are timezone-aware.
"""

from datetime import datetime, timezone
from typing import Optional


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Treat a naive datetime as UTC; leave aware datetimes untouched.

    Examples:
        >>> as_utc(datetime(2024, 1, 10)).tzinfo
        datetime.timezone.utc
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
