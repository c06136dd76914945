"""Configuration management for the Naegele calculator."""

from .defaults import DateParams, DefaultConfig, LoggingParams, RuleParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "DefaultConfig",
    "DateParams",
    "RuleParams",
    "LoggingParams",
    "get_default_config",
]
