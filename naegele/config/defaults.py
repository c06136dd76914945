"""Default configuration parameters for the Naegele calculator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DateParams:
    """LNMP validation parameters."""
    min_year: int = 1900                 # Earliest accepted LNMP year
    max_year: int = 2100                 # Latest accepted LNMP year


@dataclass(frozen=True)
class RuleParams:
    """Naegele's rule offsets."""
    day_offset: int = 7                  # Days added to the LNMP day
    month_offset: int = 3                # Months subtracted (12 - offset added otherwise)


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    dates: DateParams
    rule: RuleParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        dates=DateParams(),
        rule=RuleParams(),
        logging=LoggingParams(),
    )
