"""Logging configuration.

resultflow never configures logging on import; applications call
configure_logging() to opt in.
"""

import logging
import sys

from resultflow.shared.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to RESULTFLOW_LOG_LEVEL from settings.
    """
    if level is None:
        level = get_settings().log_level

    # Unknown names fall back to INFO
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("resultflow").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a resultflow module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger under the resultflow hierarchy, so configure_logging's level applies
    """
    return logging.getLogger(name)
