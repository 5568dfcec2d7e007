"""resultflow: Success / Error results with monadic chaining."""

from resultflow.domain.exceptions import ContractViolation, ResultflowError
from resultflow.shared.logging_config import configure_logging
from resultflow.shared.option import NOTHING, Nothing, Option, Some
from resultflow.shared.result import Error, Result, Success

__version__ = "0.1.0"

__all__ = [
    "Success",
    "Error",
    "Result",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "ContractViolation",
    "ResultflowError",
    "configure_logging",
]
