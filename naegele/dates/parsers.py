"""
Parsing and validation of LNMP date strings.

Only the dd/mm/yyyy layout is accepted: two-digit day, two-digit month and
four-digit year separated by slashes, exactly 10 characters.
"""

from typing import Any

from ..errors import InvalidDateError, InvalidFormatError, NullOrEmptyInputError
from .models import CalendarDate

DATE_FORMAT = "dd/mm/yyyy"
DATE_LENGTH = 10
MIN_YEAR = 1900
MAX_YEAR = 2100

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year: divisible by 4 and not by 100, or divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month, accounting for leap years.

    Returns 0 for a month outside 1-12.
    """
    if month < 1 or month > 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def is_valid_date(day: int, month: int, year: int,
                  min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> bool:
    """Check year range, month range and day against the month length."""
    if year < min_year or year > max_year:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def _parse_field(text: str, raw: str) -> int:
    # isdigit() accepts non-ASCII digits, which int() would happily convert
    if not (text.isascii() and text.isdigit()):
        raise InvalidFormatError(raw_input=raw)
    return int(text)


def parse_date(text: Any, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> CalendarDate:
    """
    Parse and validate a dd/mm/yyyy string.

    Args:
        text: Raw LNMP input
        min_year: Earliest accepted year
        max_year: Latest accepted year

    Returns:
        Validated CalendarDate

    Raises:
        NullOrEmptyInputError: input is None or empty
        InvalidFormatError: input does not follow dd/mm/yyyy
        InvalidDateError: fields parse but name no valid date in range
    """
    if text is None or text == "":
        raise NullOrEmptyInputError()

    if not isinstance(text, str):
        raise InvalidFormatError(raw_input=repr(text))

    if len(text) != DATE_LENGTH or text[2] != "/" or text[5] != "/":
        raise InvalidFormatError(raw_input=text)

    day = _parse_field(text[0:2], text)
    month = _parse_field(text[3:5], text)
    year = _parse_field(text[6:10], text)

    if not is_valid_date(day, month, year, min_year, max_year):
        raise InvalidDateError(
            day=day,
            month=month,
            year=year,
            context={"min_year": min_year, "max_year": max_year}
        )

    return CalendarDate(day=day, month=month, year=year)
