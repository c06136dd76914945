"""
Local time helpers for gestational age computation.

Calendar dates are anchored at local midnight, the way the system's own
calendar interprets them. DST resolution is left to the platform.
"""

import time
from datetime import datetime
from typing import Optional, Union

SECONDS_PER_DAY = 86400

Instant = Union[datetime, int, float]


def local_midnight_timestamp(year: int, month: int, day: int) -> float:
    """
    Convert a calendar date to a POSIX timestamp at 00:00:00 local time.

    Raises:
        OverflowError, OSError, ValueError: platform cannot represent the date
    """
    return datetime(year, month, day).timestamp()


def current_timestamp() -> float:
    """
    Read the wall clock as a POSIX timestamp.

    Raises:
        OSError: clock cannot be read
    """
    return time.time()


def to_timestamp(instant: Optional[Instant] = None) -> float:
    """
    Normalize an instant to a POSIX timestamp.

    Naive datetimes are interpreted as local time. None reads the wall clock.

    Raises:
        TypeError: instant is neither a datetime nor a number
    """
    if instant is None:
        return current_timestamp()

    if isinstance(instant, datetime):
        return instant.timestamp()

    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        raise TypeError(
            f"Expected a datetime or POSIX timestamp, got {type(instant).__name__}"
        )

    return float(instant)


def elapsed_whole_days(start_ts: float, end_ts: float) -> int:
    """Whole days elapsed between two timestamps, floored."""
    return int((end_ts - start_ts) // SECONDS_PER_DAY)
