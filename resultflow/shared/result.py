"""Result type for functional error handling.

This module implements a two-variant Result type (Success / Error) that makes
failure explicit in return values instead of raising. Results chain with
and_then, react through on_success / on_error, and collapse to an Option
with maybe().
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any, Generic, TypeVar, Union

from resultflow.domain.exceptions import ContractViolation
from resultflow.shared.logging_config import get_logger
from resultflow.shared.option import NOTHING, Option, Some

T = TypeVar("T")  # Success payload type
M = TypeVar("M")  # Error message type
D = TypeVar("D")  # Error data type

CONTRACT_VIOLATION_MESSAGE = "Block must return Result"

logger = get_logger(__name__)


class _FieldAccess:
    """Keyed access to dataclass fields: result["data"]."""

    def __getitem__(self, key: str) -> Any:
        if key not in {f.name for f in fields(self)}:  # type: ignore[arg-type]
            raise KeyError(key)
        return getattr(self, key)


@dataclass(frozen=True)
class Success(_FieldAccess, Generic[T]):
    """Successful result carrying a payload (which may be None)."""

    data: T

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_error(self) -> bool:
        """Check if this is an error result."""
        return False

    def and_then(self, func: Callable[[T], "Result"]) -> "Result":
        """Chain the next step with the payload.

        Args:
            func: Callable taking the payload and returning a Result

        Returns:
            Whatever Result func returned

        Raises:
            ContractViolation: If func returns anything other than a Result
        """
        result = func(self.data)
        if not isinstance(result, (Success, Error)):
            logger.error(
                f"and_then callback returned {type(result).__name__}, expected Success or Error"
            )
            raise ContractViolation(CONTRACT_VIOLATION_MESSAGE, returned=result)
        return result

    def on_success(self, func: Callable[[T], Any]) -> "Success[T]":
        """Run func on the payload for its side effect."""
        func(self.data)
        return self

    def on_error(self, func: Callable[[Any, Any], Any]) -> "Success[T]":
        """Skip func (nothing failed)."""
        return self

    def maybe(self) -> Option[T]:
        """Some(payload), or Nothing if the payload is None."""
        if self.data is None:
            return NOTHING
        return Some(self.data)

    def __repr__(self) -> str:
        return f"Success({self.data!r})"


@dataclass(frozen=True)
class Error(_FieldAccess, Generic[M, D]):
    """Failed result carrying a message or code and optional context data."""

    error_msg: M
    data: D | None = None

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_error(self) -> bool:
        """Check if this is an error result."""
        return True

    def and_then(self, func: Callable[[Any], "Result"]) -> "Error[M, D]":
        """Short-circuit: return this Error without calling func."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"and_then skipped on {self!r}")
        return self

    def on_success(self, func: Callable[[Any], Any]) -> "Error[M, D]":
        """Skip func (this is an Error)."""
        return self

    def on_error(self, func: Callable[[M, D | None], Any]) -> "Error[M, D]":
        """Run func on the message and data for its side effect."""
        func(self.error_msg, self.data)
        return self

    def maybe(self) -> Option[Any]:
        """Always Nothing; the message and data are discarded."""
        return NOTHING

    def __repr__(self) -> str:
        if self.data is None:
            return f"Error({self.error_msg!r})"
        return f"Error({self.error_msg!r}, data={self.data!r})"


# Type alias for clearer function signatures
Result = Union[Success[T], Error[M, D]]
