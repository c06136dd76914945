"""
Centralized logging configuration for the Naegele calculator.

This module configures structlog for every component. Log output goes to
stderr by default so the command-line results on stdout stay clean.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream, stderr when omitted
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for calculator events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for calculations
    """
    # Lazy proxy over a stdlib logger: resolved against the configuration in
    # place at first use, and subject to the stdlib level when unconfigured
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        subsystem="calculator"
    )


def log_computation(
    logger: FilteringBoundLogger,
    operation: str,
    lnmp: Any,
    result: Optional[str] = None,
    error: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single computation with standardized fields.

    Args:
        logger: Structlog logger instance
        operation: Name of the computation ("edd", "woa")
        lnmp: Raw LNMP input
        result: Formatted result on success
        error: ErrorKind name on failure
        context: Additional context data
    """
    bound_logger = logger.bind(operation=operation, lnmp=lnmp)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if error is None:
        bound_logger.debug("Computation succeeded", result=result)
    else:
        bound_logger.info("Computation failed", error=error)
