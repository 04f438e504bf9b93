"""
Domain exceptions - Semantic error types for the demonstrations.

A single error kind is used throughout: a validation failure carrying
a human-readable message. Domain operations return it inside an ``Err``
rather than raising it (see ``results``).
"""


class DomainError(Exception):
    """Base class for domain errors."""

    pass


class ValidationFailed(DomainError):
    """A precondition on input data was not met."""

    @property
    def message(self) -> str:
        return str(self)
