"""Result types for railway-oriented programming.

Command and query handlers return a Result instead of raising, so that
"policy not found" or "cannot modify system policy" travel as values the
caller must inspect. A negative authorization Decision is NOT a Failure: it is
a Success carrying ``allowed=False``.

Usage:
    def parse_effect(raw: str) -> Result[PolicyEffect, str]:
        try:
            return Success(value=PolicyEffect(raw.upper()))
        except ValueError:
            return Failure(error=f"Unknown effect: {raw}")

    match parse_effect("deny"):
        case Success(value=effect):
            print(effect)
        case Failure(error=error):
            print(error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Success[T] | Failure[E]
