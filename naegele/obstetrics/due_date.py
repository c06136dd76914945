"""Estimated Due Date (EDD) via Naegele's rule"""

from ..dates.models import CalendarDate
from ..dates.parsers import days_in_month

EDD_DAY_OFFSET = 7
EDD_MONTH_OFFSET = 3


def _roll_over(day: int, month: int, year: int, month_length: int) -> tuple[int, int, int]:
    """Move surplus days into the following month(s) until the day fits."""
    while day > month_length:
        day -= month_length
        month += 1
        if month > 12:
            month = 1
            year += 1
        month_length = days_in_month(month, year)
    return day, month, year


def estimate_due_date(lnmp: CalendarDate, day_offset: int = EDD_DAY_OFFSET,
                      month_offset: int = EDD_MONTH_OFFSET) -> CalendarDate:
    """
    Calculate the Estimated Due Date using Naegele's rule

    EDD = LNMP + 7 days - 3 months + 1 year

    The month shift is done as -3 months (+1 year) when the LNMP month is
    after March, otherwise as +9 months in the same year. The added days
    first carry over the end of the LNMP's own month; whatever still
    exceeds the shifted month (31 September, 30 February) carries on into
    the next one.

    Args:
        lnmp: Validated LNMP date
        day_offset: Days added to the LNMP day (default 7)
        month_offset: Months subtracted from the LNMP month (default 3)

    Returns:
        Estimated due date
    """
    day = lnmp.day + day_offset
    if lnmp.month > month_offset:
        month = lnmp.month - month_offset
        year = lnmp.year + 1
    else:
        month = lnmp.month + (12 - month_offset)
        year = lnmp.year

    day, month, year = _roll_over(day, month, year, days_in_month(lnmp.month, lnmp.year))
    day, month, year = _roll_over(day, month, year, days_in_month(month, year))

    return CalendarDate(day=day, month=month, year=year)
