"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Iterator
from typing import Protocol

from .models import User


class UserStore(Protocol):
    """Port interface for an ordered user collection."""

    def add(self, user: User) -> None:
        """
        Append a user, preserving insertion order.

        No uniqueness constraint is applied.

        Args:
            user: Validated user to store
        """
        ...

    def __iter__(self) -> Iterator[User]:
        """Iterate users in insertion order."""
        ...

    def __len__(self) -> int: ...


class OutputSink(Protocol):
    """Port interface for human-readable output."""

    def write(self, line: str) -> None:
        """
        Emit one line of output.

        Args:
            line: Text without trailing newline
        """
        ...
