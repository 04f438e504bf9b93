"""
Input validation rules for user registration.

Checks are intentionally shallow: the email check is a format
heuristic (substring presence), not an RFC 5322 validator.
"""

from .exceptions import ValidationFailed

DEFAULT_MIN_PASSWORD_LENGTH = 6

NAME_IS_EMPTY = "The name cannot be empty"
INVALID_EMAIL = "Invalid email"


def is_valid_email(email: str) -> bool:
    """Return True if the email contains both '@' and '.'."""
    return "@" in email and "." in email


def password_too_short(min_length: int) -> str:
    return f"The password must be at least {min_length} characters long"


def validate_registration(
    name: str,
    email: str,
    password: str,
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> ValidationFailed | None:
    """
    Check registration input, fail-fast.

    Order: name not blank, email shape, password length. Only the
    first failing check is reported.

    Returns:
        ValidationFailed for the first failing check, or None if all pass
    """
    if not name.strip():
        return ValidationFailed(NAME_IS_EMPTY)
    if not is_valid_email(email):
        return ValidationFailed(INVALID_EMAIL)
    if len(password) < min_password_length:
        return ValidationFailed(password_too_short(min_password_length))
    return None
