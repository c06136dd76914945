"""
Calendar date handling.

Parses dd/mm/yyyy LNMP strings into validated CalendarDate values and
provides the Gregorian month-length rules the computations rely on.
"""

from .models import CalendarDate, GestationalAge
from .parsers import DATE_FORMAT, days_in_month, is_leap_year, is_valid_date, parse_date

__all__ = [
    "CalendarDate",
    "GestationalAge",
    "DATE_FORMAT",
    "days_in_month",
    "is_leap_year",
    "is_valid_date",
    "parse_date",
]
