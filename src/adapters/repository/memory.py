"""
In-memory user store adapter - Implements UserStore protocol.

This module provides a list-backed implementation of the domain's
user store port. State lives for the lifetime of the instance only.
"""

import logging
from collections.abc import Iterator

from src.domain.models import User

logger = logging.getLogger(__name__)


class InMemoryUserStore:
    """
    Implements UserStore protocol via a Python list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Insertion order is preserved; duplicates are accepted.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, user: User) -> None:
        """
        Append a user to the store.

        Args:
            user: Validated user from the domain layer
        """
        self._users.append(user)
        logger.debug("Stored user %s (total: %d)", user.email, len(self._users))

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)
