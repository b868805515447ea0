"""Result type for operations that fail in expected ways.

Actions on the board (blank titles, unknown ids, an empty undo history,
unreadable storage files) report failure by returning ``Err`` rather than
raising, so callers decide how to surface the message.

Example usage:
    >>> def parse_priority(value: str) -> Result[Priority, str]:
    ...     try:
    ...         return Ok(Priority(value))
    ...     except ValueError:
    ...         return Err(f"Unknown priority: {value}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an ``Ok``."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an ``Err``."""
    return isinstance(result, Err)
