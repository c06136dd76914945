"""
Error kinds and their fixed display messages.

Integer codes are stable so web bindings can pass them across; -6 is
unused.
"""

from enum import IntEnum
from typing import Any


class ErrorKind(IntEnum):
    """Closed set of failures a computation can report."""
    NULL_OR_EMPTY_INPUT = -1
    INVALID_DATE = -2
    DATE_CONVERSION = -3
    SYSTEM_TIME_UNAVAILABLE = -4
    FUTURE_DATE = -5
    INVALID_FORMAT = -7


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NULL_OR_EMPTY_INPUT: "NULL or empty LNMP date provided",
    ErrorKind.INVALID_DATE: "Invalid date value",
    ErrorKind.DATE_CONVERSION: "Failed to convert date",
    ErrorKind.SYSTEM_TIME_UNAVAILABLE: "Failed to get system time",
    ErrorKind.FUTURE_DATE: "LNMP date is in the future",
    ErrorKind.INVALID_FORMAT: "Invalid date format, expected dd/mm/yyyy",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def error_message(kind: Any) -> str:
    """
    Return the human-readable message for an error kind.

    Accepts an ErrorKind, its integer code or its name. Anything else maps
    to "Unknown error", so the lookup never raises.
    """
    if isinstance(kind, ErrorKind):
        return _MESSAGES[kind]

    if isinstance(kind, int) and not isinstance(kind, bool):
        try:
            return _MESSAGES[ErrorKind(kind)]
        except ValueError:
            return UNKNOWN_ERROR_MESSAGE

    if isinstance(kind, str):
        member = ErrorKind.__members__.get(kind.upper())
        if member is not None:
            return _MESSAGES[member]

    return UNKNOWN_ERROR_MESSAGE
