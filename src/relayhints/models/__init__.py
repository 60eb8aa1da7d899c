"""Pure dataclasses and enums with zero I/O.

The models layer is the foundation of the diamond DAG. It has **no
dependencies** on any other relayhints package -- only the Python standard
library.

Attributes:
    HintKey: Evidence categories linking a relay to a pubkey, each with a
        default base weight.
    HINT_KEY_COUNT: Number of evidence categories (timestamp slots per relay).
    RelayScores: Frozen per-relay ranking record returned by detailed queries.
"""

from .constants import HINT_KEY_COUNT, HintKey
from .relay_scores import RelayScores


__all__ = [
    "HINT_KEY_COUNT",
    "HintKey",
    "RelayScores",
]
