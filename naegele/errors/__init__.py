"""
Error classification system for the Naegele calculator.

Every failure is a NaegeleError subclass carrying an ErrorKind; the public
compute functions turn these into result objects with fixed messages.
"""

from .base import ConfigurationError, NaegeleError
from .input_errors import (
    InputError,
    InvalidDateError,
    InvalidFormatError,
    NullOrEmptyInputError,
)
from .kinds import UNKNOWN_ERROR_MESSAGE, ErrorKind, error_message
from .temporal_errors import (
    DateConversionError,
    FutureDateError,
    SystemTimeUnavailableError,
    TemporalError,
)

__all__ = [
    "ErrorKind",
    "error_message",
    "UNKNOWN_ERROR_MESSAGE",
    "NaegeleError",
    "ConfigurationError",
    # Input errors
    "InputError",
    "NullOrEmptyInputError",
    "InvalidFormatError",
    "InvalidDateError",
    # Temporal errors
    "TemporalError",
    "DateConversionError",
    "SystemTimeUnavailableError",
    "FutureDateError",
]
