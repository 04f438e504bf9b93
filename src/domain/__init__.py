"""
Domain layer - Pure logic with zero framework imports.

Contains the five demonstration building blocks: optional-value
formatting, email shape checking, the immutable User value type,
guarded division and the user registry. Infrastructure is reached
only through the port interfaces.
"""

from .arithmetic import divide
from .exceptions import DomainError, ValidationFailed
from .models import User
from .ports import OutputSink, UserStore
from .registry import UserRepository
from .results import Err, Ok, Result
from .validation import is_valid_email, validate_registration
from .values import format_optional_length

__all__ = [
    "DomainError",
    "Err",
    "Ok",
    "OutputSink",
    "Result",
    "User",
    "UserRepository",
    "UserStore",
    "ValidationFailed",
    "divide",
    "format_optional_length",
    "is_valid_email",
    "validate_registration",
]
