"""
Command-line entry point.

    naegele LNMP[dd/mm/yyyy]

Prints the EDD and WOA on stdout and exits 0, or prints a single
"Error: <message>" line on stderr and exits 1.
"""

import os
import sys
from typing import Optional

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging.config import configure_logging, get_logger
from .obstetrics.calculator import NaegeleCalculator

LOG_LEVEL_ENV = "NAEGELE_LOG_LEVEL"

logger = get_logger(__name__)


def load_calculator(loader: Optional[ConfigLoader] = None) -> NaegeleCalculator:
    """
    Load configuration, set up logging and build the calculator.

    Raises:
        ConfigurationError: configuration cannot be read or is invalid
    """
    loader = loader or ConfigLoader.create()

    overrides = {}
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        overrides["logging"] = {"level": env_level}
    config = loader.merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        raise ConfigurationError(
            f"Invalid configuration ({details})",
            path=str(loader.config_file),
            errors=errors
        )

    log_config = config.get("logging", {})
    configure_logging(
        level=log_config.get("level", "WARNING"),
        format_json=log_config.get("format_json", False),
    )
    logger.debug("Configuration loaded", config_file=str(loader.config_file))

    return NaegeleCalculator.from_config(config)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the calculator for a single LNMP argument."""
    argv = argv if argv is not None else sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "naegele"

    if len(argv) != 1:
        print(f"Usage: {prog} LNMP[dd/mm/yyyy]", file=sys.stderr)
        return 1

    try:
        calculator = load_calculator()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = calculator.compute(argv[0])
    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    print(f"EDD: {result.edd}")
    print(f"WOA: {result.woa}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
