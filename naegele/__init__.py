"""
Naegele - Obstetric date calculator

Computes the Estimated Due Date (Naegele's rule) and the Weeks of
Amenorrhea from a Last Normal Menstrual Period given as dd/mm/yyyy.
"""

from .dates import CalendarDate, GestationalAge, parse_date
from .errors import ErrorKind, error_message
from .obstetrics import (
    CombinedResult,
    ComputationResult,
    NaegeleCalculator,
    compute,
    compute_edd,
    compute_woa,
    estimate_due_date,
    gestational_age,
)

__version__ = "0.1.0"

__all__ = [
    "compute",
    "compute_edd",
    "compute_woa",
    "error_message",
    "ErrorKind",
    "NaegeleCalculator",
    "ComputationResult",
    "CombinedResult",
    "CalendarDate",
    "GestationalAge",
    "parse_date",
    "estimate_due_date",
    "gestational_age",
]
