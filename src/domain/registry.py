"""
User registry domain service.

Holds an ordered collection of users (via the UserStore port) and
performs validated insertion plus lookup by exact email match.

Notes:
- Email uniqueness is not enforced; duplicate emails are appended.
- The password is checked for length and then discarded, never stored.
- Lookup is a linear scan in insertion order, case-sensitive.
"""

from dataclasses import dataclass

from .models import User
from .ports import UserStore
from .results import Err, Ok, Result
from .validation import DEFAULT_MIN_PASSWORD_LENGTH, validate_registration


@dataclass
class UserRepository:
    """
    Domain service for user registration and lookup.

    The store is exclusively owned by one repository instance.
    """

    store: UserStore
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH

    def register_user(self, name: str, email: str, password: str) -> Result[User]:
        """
        Validate input and append a new user.

        Args:
            name: Display name (must not be blank)
            email: Email address (must contain '@' and '.')
            password: Password (checked for length, not retained)

        Returns:
            Ok with the stored user, or Err with the first failing check.
            The store is unchanged on failure.
        """
        error = validate_registration(name, email, password, self.min_password_length)
        if error is not None:
            return Err(error)

        user = User(name=name, email=email)
        self.store.add(user)
        return Ok(user)

    def get_user_by_email(self, email: str) -> User | None:
        """Return the first user whose email equals ``email`` exactly, or None."""
        for user in self.store:
            if user.email == email:
                return user
        return None

    @property
    def users(self) -> tuple[User, ...]:
        """Snapshot of registered users in insertion order."""
        return tuple(self.store)

    def __len__(self) -> int:
        return len(self.store)
