"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings cache isolation
- In-memory repositories
- Recording output sinks
"""

from collections.abc import Generator

import pytest

from src.adapters.repository.memory import InMemoryUserStore
from src.config.settings import get_settings
from src.domain.registry import UserRepository


class RecordingSink:
    """OutputSink that keeps written lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset the cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> UserRepository:
    """Create a repository backed by a fresh in-memory store."""
    return UserRepository(store=InMemoryUserStore())


@pytest.fixture
def sink() -> RecordingSink:
    """Create a recording output sink."""
    return RecordingSink()
