"""Weeks of Amenorrhea (WOA) since the LNMP"""

from typing import Optional

from ..dates.models import CalendarDate, GestationalAge
from ..errors import DateConversionError, FutureDateError, SystemTimeUnavailableError
from ..utils.time import Instant, elapsed_whole_days, local_midnight_timestamp, to_timestamp


def lnmp_timestamp(lnmp: CalendarDate) -> float:
    """
    Anchor the LNMP at local midnight.

    Raises:
        DateConversionError: platform cannot represent the date
    """
    try:
        return local_midnight_timestamp(lnmp.year, lnmp.month, lnmp.day)
    except (OverflowError, OSError, ValueError) as e:
        raise DateConversionError(
            context={"lnmp": lnmp.format(), "reason": str(e)}
        ) from e


def gestational_age(lnmp: CalendarDate, now: Optional[Instant] = None) -> GestationalAge:
    """
    Calculate completed weeks and days from LNMP midnight to now

    Args:
        lnmp: Validated LNMP date
        now: Current instant (datetime, naive means local, or POSIX
            timestamp); the wall clock is read when omitted

    Returns:
        Gestational age

    Raises:
        DateConversionError: LNMP cannot be converted to an instant
        SystemTimeUnavailableError: wall clock cannot be read
        FutureDateError: LNMP lies after now
        TypeError: now is neither a datetime nor a POSIX timestamp
    """
    start_ts = lnmp_timestamp(lnmp)

    try:
        now_ts = to_timestamp(now)
    except (OverflowError, OSError, ValueError) as e:
        raise SystemTimeUnavailableError(context={"reason": str(e)}) from e

    elapsed_seconds = now_ts - start_ts
    if elapsed_seconds < 0:
        raise FutureDateError(
            elapsed_seconds=elapsed_seconds,
            context={"lnmp": lnmp.format()}
        )

    return GestationalAge.from_days(elapsed_whole_days(start_ts, now_ts))


def format_gestational_age(age: GestationalAge) -> str:
    """Render a gestational age as WOA text, e.g. "10 weeks, 3 days"."""
    return age.format()
