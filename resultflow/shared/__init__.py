"""
Shared utilities module.

Result and Option types for functional error handling, plus the settings and
logging configuration used across the package.
"""

from resultflow.shared.config import Settings, get_settings
from resultflow.shared.logging_config import configure_logging, get_logger
from resultflow.shared.option import NOTHING, Nothing, Option, Some
from resultflow.shared.result import Error, Result, Success

__all__ = [
    "Success",
    "Error",
    "Result",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
