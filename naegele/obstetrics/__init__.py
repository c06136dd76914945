"""Obstetric date estimates derived from the LNMP"""

from .amenorrhea import format_gestational_age, gestational_age
from .calculator import (
    CombinedResult,
    ComputationResult,
    NaegeleCalculator,
    compute,
    compute_edd,
    compute_woa,
)
from .due_date import estimate_due_date

__all__ = [
    "NaegeleCalculator",
    "ComputationResult",
    "CombinedResult",
    "compute",
    "compute_edd",
    "compute_woa",
    "estimate_due_date",
    "gestational_age",
    "format_gestational_age",
]
