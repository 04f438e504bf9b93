"""Repository adapters - User store implementations."""

from .memory import InMemoryUserStore

__all__ = ["InMemoryUserStore"]
