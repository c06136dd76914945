"""
Temporal error classifications for gestational age computation.

These exceptions come from turning the LNMP into an absolute instant and
comparing it with the wall clock.
"""

from typing import Optional

from .base import NaegeleError
from .kinds import ErrorKind


class TemporalError(NaegeleError):
    """Base class for clock and instant conversion failures."""


class DateConversionError(TemporalError):
    """LNMP could not be normalized to a local-midnight timestamp."""

    kind = ErrorKind.DATE_CONVERSION


class SystemTimeUnavailableError(TemporalError):
    """Wall clock could not be read."""

    kind = ErrorKind.SYSTEM_TIME_UNAVAILABLE


class FutureDateError(TemporalError):
    """LNMP lies after the current instant."""

    kind = ErrorKind.FUTURE_DATE

    def __init__(self, message: Optional[str] = None,
                 elapsed_seconds: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.elapsed_seconds = elapsed_seconds
