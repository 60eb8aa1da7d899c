"""
Detailed ranking record for a single (pubkey, relay) pair.

Returned by
[MemoryHintDB.get_detailed_scores()][relayhints.hints.memory.MemoryHintDB.get_detailed_scores]
for diagnostics: the relay URL, the latest timestamp observed for every
[HintKey][relayhints.models.constants.HintKey], and the total score at the
moment of the query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance, validate_str_no_null, validate_timestamp_slots
from .constants import HINT_KEY_COUNT, HintKey


@dataclass(frozen=True, slots=True)
class RelayScores:
    """Immutable snapshot of the evidence behind one ranked relay.

    Attributes:
        relay: Relay URL exactly as it was recorded.
        timestamps: One Unix timestamp per ``HintKey`` (indexed by the key's
            value). ``0`` means the key was never observed for this relay.
        sum: Total decayed score at query time.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If ``timestamps`` has the wrong number of slots or
            ``relay`` contains null bytes.

    Examples:
        ```python
        scores = db.get_detailed_scores(pubkey, 1)[0]
        scores.relay                                      # 'wss://relay.damus.io'
        scores.timestamp(HintKey.LAST_IN_RELAY_LIST)      # 1700000000
        scores.scores                                     # {HintKey.LAST_IN_RELAY_LIST: 1700000000}
        ```
    """

    relay: str
    timestamps: tuple[int, ...]
    sum: int

    def __post_init__(self) -> None:
        validate_str_no_null(self.relay, "relay")
        validate_timestamp_slots(self.timestamps, HINT_KEY_COUNT, "timestamps")
        validate_instance(self.sum, int, "sum")

    def timestamp(self, key: HintKey) -> int:
        """Latest timestamp recorded for ``key`` (``0`` if never observed)."""
        return self.timestamps[key]

    @property
    def scores(self) -> dict[HintKey, int]:
        """Observed keys mapped to their latest timestamp."""
        return {HintKey(i): ts for i, ts in enumerate(self.timestamps) if ts}

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form with hint keys rendered by name, for JSON output."""
        return {
            "relay": self.relay,
            "timestamps": {str(HintKey(i)): ts for i, ts in enumerate(self.timestamps)},
            "sum": self.sum,
        }
