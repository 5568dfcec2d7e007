"""Domain-level exceptions for resultflow.

Expected failures travel as Error values. These exceptions are reserved for
programmer mistakes that must interrupt the caller.
"""

from typing import Any


class ResultflowError(Exception):
    """Base exception for all resultflow errors."""
    pass


class ContractViolation(ResultflowError, TypeError):
    """Raised when an and_then callback does not return a Result."""

    def __init__(self, message: str, returned: Any = None):
        super().__init__(message)
        self.returned = returned
