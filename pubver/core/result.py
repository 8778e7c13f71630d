"""Result type for explicit error handling.

Every fallible step of a reconcile run (reading the manifest, fetching the
registry document, parsing a version) returns a Result instead of raising.
The CLI is the only place where an Err turns into a process exit code.

Usage:
    def parse_patch(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Err(f"not a number: {text!r}")
        return Ok(int(text))

    match parse_patch("7"):
        case Ok(value):
            print(f"patch: {value}")
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying `value`."""

    value: T

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply `f` to the value and wrap the outcome in Ok."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        """Nothing to map on success; returns self."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying `error`."""

    error: E

    def unwrap(self) -> None:
        """Raise ValueError; there is no value to return.

        Raises:
            ValueError: Always, with the error in the message.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def map(self, f: Callable[[T], U]) -> Err[E]:
        """Nothing to map on failure; returns self."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply `f` to the error and wrap the outcome in Err."""
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
