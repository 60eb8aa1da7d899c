"""Abstract interface shared by hint database implementations.

Callers that discover relays (relay list parsers, fetchers, publishers) only
depend on this interface, so an in-memory store can later be swapped for a
different backend without touching them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from relayhints.models.constants import HintKey
from relayhints.models.relay_scores import RelayScores


class BaseHintDB(ABC):
    """Advisory store ranking relays per pubkey by recency-weighted evidence.

    Implementations must never raise for well-typed inputs: unknown pubkeys
    yield empty results, future timestamps are clamped, and stale writes are
    ignored.
    """

    @abstractmethod
    def save(self, pubkey: str, relay: str, key: HintKey, ts: int) -> None:
        """Record that ``relay`` was linked to ``pubkey`` by ``key`` at ``ts``."""
        ...

    @abstractmethod
    def top_n(self, pubkey: str, n: int) -> list[str]:
        """Best ``n`` relay URLs for ``pubkey``, highest score first."""
        ...

    @abstractmethod
    def get_detailed_scores(self, pubkey: str, n: int) -> list[RelayScores]:
        """Like [top_n()][relayhints.hints.base.BaseHintDB.top_n] with full evidence."""
        ...

    @abstractmethod
    def print_scores(self, file: TextIO | None = None) -> None:
        """Write a human-readable dump of every pubkey's relay list."""
        ...
