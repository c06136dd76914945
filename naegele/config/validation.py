"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import DateParams, LoggingParams, RuleParams

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_SECTIONS = {"dates": DateParams, "rule": RuleParams, "logging": LoggingParams}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_date_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate LNMP year range."""
        errors = []

        for name in ("min_year", "max_year"):
            if name in params:
                value = params[name]
                # Four-digit years only, the input format has no room for more
                if not _is_int(value) or value < 1 or value > 9999:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an integer between 1 and 9999",
                        value=value
                    ))

        min_year = params.get("min_year")
        max_year = params.get("max_year")
        if _is_int(min_year) and _is_int(max_year) and min_year > max_year:
            errors.append(ValidationError(
                field="min_year",
                message="Must not be greater than max_year",
                value=min_year
            ))

        return errors

    @staticmethod
    def validate_rule_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Naegele's rule offsets."""
        errors = []

        if "day_offset" in params:
            value = params["day_offset"]
            if not _is_int(value) or value < 0 or value > 28:
                errors.append(ValidationError(
                    field="day_offset",
                    message="Must be an integer between 0 and 28",
                    value=value
                ))

        if "month_offset" in params:
            value = params["month_offset"]
            if not _is_int(value) or value < 1 or value > 11:
                errors.append(ValidationError(
                    field="month_offset",
                    message="Must be an integer between 1 and 11",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params_cls in _SECTIONS.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            known = {f.name for f in fields(params_cls)}
            for key in config[section]:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown parameter",
                        value=config[section][key]
                    ))
        if errors:
            return errors

        if "dates" in config:
            errors.extend(ConfigValidator.validate_date_params(config["dates"]))

        if "rule" in config:
            errors.extend(ConfigValidator.validate_rule_params(config["rule"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
