"""
Base error classes shared by every failure the calculator reports.
"""

from typing import Any, Optional

from .kinds import ErrorKind, error_message


class NaegeleError(Exception):
    """Base class for calculation failures that map onto an ErrorKind."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: Optional[str] = None, context: Optional[dict[str, Any]] = None):
        if message is None:
            message = error_message(self.kind)
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(Exception):
    """Configuration file could not be read or holds invalid values."""

    def __init__(self, message: str, path: Optional[str] = None,
                 errors: Optional[list] = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []
