"""
Result types - Explicit success/failure values for domain operations.

Validation failures are propagated by ordinary return instead of
stack unwinding. Callers that prefer exception flow can ``unwrap()``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .exceptions import ValidationFailed

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome wrapping a ValidationFailed error."""

    error: ValidationFailed

    @property
    def message(self) -> str:
        return self.error.message

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
