"""Option type produced by Result.maybe().

Some(value) marks a present value, Nothing marks its absence.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Value type
U = TypeVar("U")  # Default type


@dataclass(frozen=True)
class Some(Generic[T]):
    """Option holding a present value."""

    value: T

    def is_some(self) -> bool:
        """Check if a value is present."""
        return True

    def is_nothing(self) -> bool:
        """Check if the value is absent."""
        return False

    def or_else(self, default: U) -> T:
        """Get the value (ignores default because this is Some)."""
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing:
    """Option with no value."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def or_else(self, default: U) -> U:
        """Get the default (no value to return)."""
        return default

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

Option = Union[Some[T], Nothing]
