"""
Domain models - Immutable value types.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Registered user.

    Frozen: a "changed" user is a new value. Equality and hashing are
    structural over both fields. No validation happens here; inputs are
    checked at the registry boundary.
    """

    name: str
    email: str

    def __str__(self) -> str:
        return f"User(name={self.name}, email={self.email})"
