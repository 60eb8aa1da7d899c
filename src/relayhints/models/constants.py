"""Shared constants for the models layer.

Defines the evidence categories linking a relay to a pubkey. Placing them
here lets both the result models and the hint database engine use them
without circular imports.

See Also:
    [RelayScores][relayhints.models.relay_scores.RelayScores]: Stores one
        timestamp per [HintKey][relayhints.models.constants.HintKey].
    [HintDBConfig][relayhints.hints.configs.HintDBConfig]: Allows overriding
        the default base points per key.
"""

from __future__ import annotations

from enum import IntEnum


class HintKey(IntEnum):
    """Reason a relay is associated with a pubkey.

    The integer value is the slot index in the fixed-size timestamp array
    kept for every (pubkey, relay) pair, so members must stay contiguous
    from zero.

    Attributes:
        LAST_FETCH_ATTEMPT: The relay was used to fetch this pubkey's data.
            Trying is weak evidence because the attempt may fail.
        MOST_RECENT_EVENT_FETCHED: An event by this pubkey was actually
            received from the relay (the pubkey was seen publishing there).
        LAST_IN_RELAY_LIST: The relay appeared in the pubkey's own relay
            list (NIP-65 kind 10002).
        LAST_WRITE_TARGET: The relay was used to write data addressed to
            this pubkey (mentions, replies, reactions).

    Examples:
        ```python
        HintKey.LAST_IN_RELAY_LIST.base_points  # 350
        str(HintKey.LAST_IN_RELAY_LIST)          # 'last_in_relay_list'
        HintKey.from_name("last_write_target")   # HintKey.LAST_WRITE_TARGET
        ```
    """

    LAST_FETCH_ATTEMPT = 0
    MOST_RECENT_EVENT_FETCHED = 1
    LAST_IN_RELAY_LIST = 2
    LAST_WRITE_TARGET = 3

    @property
    def base_points(self) -> int:
        """Default weight of this evidence category (always positive)."""
        return _BASE_POINTS[self]

    @classmethod
    def from_name(cls, name: str) -> HintKey:
        """Resolve a key from its lowercase or uppercase member name.

        Raises:
            ValueError: If ``name`` is not a known key.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown hint key: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


_BASE_POINTS: dict[HintKey, int] = {
    HintKey.LAST_FETCH_ATTEMPT: 50,
    HintKey.MOST_RECENT_EVENT_FETCHED: 700,
    HintKey.LAST_IN_RELAY_LIST: 350,
    HintKey.LAST_WRITE_TARGET: 20,
}

HINT_KEY_COUNT = len(HintKey)
