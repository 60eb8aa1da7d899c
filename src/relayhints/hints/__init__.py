"""Relay hint database: interning, evidence table, scoring and ranked queries.

Attributes:
    BaseHintDB: Abstract interface consumed by relay-discovery code.
    MemoryHintDB: Thread-safe in-memory implementation.
    HintDBConfig: Pydantic configuration for weights and decay.
    RelayTable: Append-only relay URL interning table.
    score: Pure recency-weighted scoring function.

See Also:
    [relayhints.models][relayhints.models]: ``HintKey`` and ``RelayScores``.
"""

from .base import BaseHintDB
from .configs import HintDBConfig
from .memory import MemoryHintDB, RelayEntry
from .relay_table import RelayTable
from .scoring import now, score


__all__ = [
    "BaseHintDB",
    "HintDBConfig",
    "MemoryHintDB",
    "RelayEntry",
    "RelayTable",
    "now",
    "score",
]
