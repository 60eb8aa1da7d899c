"""
Pytest configuration and shared fixtures for relayhints tests.

Provides:
- A controllable clock so scores and clamping are deterministic
- Hint database factories wired to that clock
- Sample pubkeys and relay URLs
"""

import logging
from collections.abc import Callable
from typing import Any

import pytest

from relayhints.hints import HintDBConfig, MemoryHintDB


NOW = 1_700_000_000


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Clock
# ============================================================================


class FakeClock:
    """Callable returning a settable Unix time."""

    def __init__(self, value: int = NOW) -> None:
        self.value = value

    def __call__(self) -> int:
        return self.value

    def advance(self, seconds: int) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Hint Database Fixtures
# ============================================================================


@pytest.fixture
def db(clock: FakeClock) -> MemoryHintDB:
    """Hint database with default config and a fixed clock."""
    return MemoryHintDB(clock=clock)


@pytest.fixture
def make_db(clock: FakeClock) -> Callable[..., MemoryHintDB]:
    """Factory building a hint database from config overrides."""

    def _make(**overrides: Any) -> MemoryHintDB:
        return MemoryHintDB(HintDBConfig(**overrides), clock=clock)

    return _make


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def alice() -> str:
    return "a" * 64


@pytest.fixture
def bob() -> str:
    return "b" * 64


@pytest.fixture
def relay_urls() -> list[str]:
    return [
        "wss://relay.damus.io",
        "wss://nos.lol",
        "wss://relay.nostr.band",
        "wss://nostr.wine",
        "wss://relay.primal.net",
    ]
