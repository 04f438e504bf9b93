"""
Unit tests for the User value type.
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from src.domain.models import User


class TestUserEquality:
    """Tests for structural equality."""

    def test_equal_fields_compare_equal(self) -> None:
        """Users with the same name and email are equal."""
        assert User("Juan", "juan@example.com") == User("Juan", "juan@example.com")

    def test_different_email_not_equal(self) -> None:
        """Users differing in email are not equal."""
        assert User("Juan", "juan@example.com") != User("Juan", "other@example.com")

    def test_equal_users_hash_equal(self) -> None:
        """Equal users collapse in a set."""
        users = {User("Juan", "juan@example.com"), User("Juan", "juan@example.com")}
        assert len(users) == 1


class TestUserImmutability:
    """Tests for field immutability."""

    def test_name_cannot_be_assigned(self) -> None:
        """Assigning a field raises."""
        user = User("Juan", "juan@example.com")
        with pytest.raises(FrozenInstanceError):
            user.name = "Ana"  # type: ignore[misc]

    def test_changed_user_is_new_value(self) -> None:
        """replace() builds a new user and leaves the original intact."""
        user = User("Juan", "juan@example.com")
        changed = replace(user, name="Ana")

        assert changed == User("Ana", "juan@example.com")
        assert user.name == "Juan"

    def test_no_validation_at_construction(self) -> None:
        """Construction accepts any text."""
        user = User("", "not-an-email")
        assert user.email == "not-an-email"


class TestUserRendering:
    """Tests for string rendering."""

    def test_str_format(self) -> None:
        """str() renders fields without quotes."""
        user = User("Juan Pérez", "juan.perez@example.com")
        assert str(user) == "User(name=Juan Pérez, email=juan.perez@example.com)"
