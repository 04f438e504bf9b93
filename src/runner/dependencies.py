"""
Runner dependencies - Factories for domain services and adapters.
"""

from src.adapters.console.printer import ConsolePrinter
from src.adapters.repository.memory import InMemoryUserStore
from src.config.settings import get_settings
from src.domain.registry import UserRepository

# Module-level singleton - ConsolePrinter is stateless
_output_sink = ConsolePrinter()


def get_output_sink() -> ConsolePrinter:
    """Get console printer (singleton)."""
    return _output_sink


def get_user_repository() -> UserRepository:
    """
    Create a user repository backed by a fresh in-memory store.

    Each call returns an independent registry; nothing is shared
    between demonstration runs.
    """
    settings = get_settings()
    return UserRepository(
        store=InMemoryUserStore(),
        min_password_length=settings.min_password_length,
    )
