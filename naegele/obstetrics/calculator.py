"""
Naegele calculator coordinator.

Composes LNMP parsing, the EDD rule and the WOA computation, and turns
calculator exceptions into result objects at the public boundary. Every
call is a pure function of its input plus at most one clock read.
"""

from dataclasses import dataclass
from typing import Any, Optional

from structlog.types import FilteringBoundLogger

from ..config.defaults import DateParams, RuleParams
from ..dates.models import CalendarDate
from ..dates.parsers import parse_date
from ..errors import ErrorKind, NaegeleError, error_message
from ..logging.config import get_calculation_logger, log_computation
from ..utils.time import Instant
from .amenorrhea import format_gestational_age, gestational_age
from .due_date import estimate_due_date


@dataclass(frozen=True)
class ComputationResult:
    """Outcome of a single computation: a formatted value or an error kind."""
    label: str
    value: Optional[str] = None
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ComputationResult holds exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Display text for the error, None on success."""
        return None if self.error is None else error_message(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as {"success", <label>, "error"} for web bindings."""
        return {
            "success": self.ok,
            self.label: self.value,
            "error": self.message,
        }


@dataclass(frozen=True)
class CombinedResult:
    """Outcome of computing EDD and WOA together."""
    edd: Optional[str] = None
    woa: Optional[str] = None
    error: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.error is None and (self.edd is None or self.woa is None):
            raise ValueError("Successful CombinedResult needs both edd and woa")
        if self.error is not None and (self.edd is not None or self.woa is not None):
            raise ValueError("Failed CombinedResult carries no values")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def value(self) -> Optional[tuple[str, str]]:
        if self.error is not None:
            return None
        return (self.edd, self.woa)  # type: ignore[return-value]

    @property
    def message(self) -> Optional[str]:
        return None if self.error is None else error_message(self.error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.ok,
            "edd": self.edd,
            "woa": self.woa,
            "error": self.message,
        }


class NaegeleCalculator:
    """
    Computes EDD and WOA from LNMP strings.

    Holds only immutable parameters, so one instance can serve any number
    of callers.
    """

    def __init__(self, dates: Optional[DateParams] = None, rule: Optional[RuleParams] = None) -> None:
        self.dates = dates or DateParams()
        self.rule = rule or RuleParams()

    @property
    def logger(self) -> FilteringBoundLogger:
        # New proxy per access; reflects the current logging configuration
        return get_calculation_logger(__name__)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "NaegeleCalculator":
        """Build a calculator from a merged configuration dictionary."""
        return cls(
            dates=DateParams(**config.get("dates", {})),
            rule=RuleParams(**config.get("rule", {})),
        )

    def _parse(self, lnmp: Any) -> CalendarDate:
        return parse_date(lnmp, self.dates.min_year, self.dates.max_year)

    def due_date(self, lnmp: Any) -> str:
        """
        Formatted EDD for an LNMP string.

        Raises:
            NaegeleError: input is missing, malformed or not a valid date
        """
        date = self._parse(lnmp)
        edd = estimate_due_date(date, self.rule.day_offset, self.rule.month_offset)
        return edd.format()

    def weeks_of_amenorrhea(self, lnmp: Any, now: Optional[Instant] = None) -> str:
        """
        Formatted WOA for an LNMP string.

        Raises:
            NaegeleError: invalid input, clock or conversion failure, future LNMP
        """
        date = self._parse(lnmp)
        return format_gestational_age(gestational_age(date, now))

    def compute_edd(self, lnmp: Any) -> ComputationResult:
        try:
            edd = self.due_date(lnmp)
        except NaegeleError as e:
            log_computation(self.logger, "edd", lnmp, error=e.kind.name, context=e.context)
            return ComputationResult(label="edd", error=e.kind)

        log_computation(self.logger, "edd", lnmp, result=edd)
        return ComputationResult(label="edd", value=edd)

    def compute_woa(self, lnmp: Any, now: Optional[Instant] = None) -> ComputationResult:
        try:
            woa = self.weeks_of_amenorrhea(lnmp, now)
        except NaegeleError as e:
            log_computation(self.logger, "woa", lnmp, error=e.kind.name, context=e.context)
            return ComputationResult(label="woa", error=e.kind)

        log_computation(self.logger, "woa", lnmp, result=woa)
        return ComputationResult(label="woa", value=woa)

    def compute(self, lnmp: Any, now: Optional[Instant] = None) -> CombinedResult:
        """
        Compute EDD, then WOA.

        The first failure is returned; WOA is not attempted when EDD fails.
        """
        edd_result = self.compute_edd(lnmp)
        if not edd_result.ok:
            return CombinedResult(error=edd_result.error)

        woa_result = self.compute_woa(lnmp, now)
        if not woa_result.ok:
            return CombinedResult(error=woa_result.error)

        return CombinedResult(edd=edd_result.value, woa=woa_result.value)


_default_calculator = NaegeleCalculator()


def compute_edd(lnmp: Any) -> ComputationResult:
    """Estimated Due Date for a dd/mm/yyyy LNMP string."""
    return _default_calculator.compute_edd(lnmp)


def compute_woa(lnmp: Any, now: Optional[Instant] = None) -> ComputationResult:
    """Weeks of Amenorrhea from a dd/mm/yyyy LNMP string to now."""
    return _default_calculator.compute_woa(lnmp, now)


def compute(lnmp: Any, now: Optional[Instant] = None) -> CombinedResult:
    """EDD and WOA together, reporting only the first failure."""
    return _default_calculator.compute(lnmp, now)
