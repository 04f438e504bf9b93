"""
Demonstrations.

Each function is self-contained and writes its lines to an OutputSink.
There is no data flow between demonstrations.
"""

from src.domain.arithmetic import divide
from src.domain.models import User
from src.domain.ports import OutputSink
from src.domain.registry import UserRepository
from src.domain.results import Err
from src.domain.validation import is_valid_email
from src.domain.values import format_optional_length

SAMPLE_REGISTRATIONS = [
    ("Juan Pérez", "juan.perez@example.com", "password123"),
    ("Ana Gómez", "ana.gomez@example.com", "password456"),
    ("Invalid", "invalid_email", "pass"),
]


def null_safety_demo(output: OutputSink) -> None:
    name: str | None = None
    output.write(f"The length of the name is: {format_optional_length(name)}")


def email_validation_demo(output: OutputSink) -> None:
    email = "juan.perez@example.com"
    if is_valid_email(email):
        output.write("The email is valid")
    else:
        output.write("The email is not valid")


def immutable_user_demo(output: OutputSink) -> None:
    user = User(name="Juan Pérez", email="juan.perez@example.com")
    output.write(f"User: {user}")


def division_demo(output: OutputSink) -> None:
    result = divide(10, 0)
    if isinstance(result, Err):
        output.write(f"Error: {result.message}")
    else:
        output.write(f"Result: {result.value}")


def user_registry_demo(output: OutputSink, repository: UserRepository) -> None:
    """
    Register the sample users, then look one up.

    The batch stops at the first failed registration. Users registered
    before the failure stay in the repository.
    """
    for name, email, password in SAMPLE_REGISTRATIONS:
        result = repository.register_user(name, email, password)
        if isinstance(result, Err):
            output.write(f"Error registering user: {result.message}")
            break

    user = repository.get_user_by_email("juan.perez@example.com")
    if user is not None:
        output.write(f"User found: Name: {user.name}, Email: {user.email}")
    else:
        output.write("User not found")
