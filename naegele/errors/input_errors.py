"""
Input error classifications for LNMP parsing and validation.

These exceptions describe problems with the date string handed to the
calculator, before any calendar arithmetic runs.
"""

from typing import Optional

from .base import NaegeleError
from .kinds import ErrorKind


class InputError(NaegeleError):
    """Base class for rejected LNMP input."""


class NullOrEmptyInputError(InputError):
    """No LNMP string was provided."""

    kind = ErrorKind.NULL_OR_EMPTY_INPUT


class InvalidFormatError(InputError):
    """LNMP string does not follow dd/mm/yyyy."""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, message: Optional[str] = None, raw_input: Optional[str] = None,
                 expected_format: str = "dd/mm/yyyy", **kwargs):
        super().__init__(message, **kwargs)
        self.raw_input = raw_input
        self.expected_format = expected_format


class InvalidDateError(InputError):
    """LNMP string is well formed but names a date outside the calendar or range."""

    kind = ErrorKind.INVALID_DATE

    def __init__(self, message: Optional[str] = None, day: Optional[int] = None,
                 month: Optional[int] = None, year: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.day = day
        self.month = month
        self.year = year
