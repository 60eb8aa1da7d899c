"""Recency-weighted scoring of relay evidence.

Each observed evidence category contributes

```text
base_points[key] * scale / max(now + grace_period - ts, 1) ** decay_exponent
```

truncated to an int, and the contributions are summed. The grace period
shifts "now" forward so evidence recorded seconds ago does not dominate
every ranking with an enormous, unstable value.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from .configs import DEFAULT_DECAY_EXPONENT, DEFAULT_GRACE_PERIOD, DEFAULT_SCALE


def now() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


def score(
    timestamps: Sequence[int],
    base_points: Sequence[int],
    current_time: int,
    *,
    decay_exponent: float = DEFAULT_DECAY_EXPONENT,
    scale: float = DEFAULT_SCALE,
    grace_period: int = DEFAULT_GRACE_PERIOD,
) -> int:
    """Compute the decayed, weighted score of one relay's evidence.

    Pure function: the result depends only on its arguments, and
    reordering the slots together with their base points does not change it.

    Args:
        timestamps: Latest observation per evidence slot; ``0`` means never
            observed and contributes nothing.
        base_points: Weight per slot, aligned with ``timestamps``.
        current_time: Reference Unix time ("now").
        decay_exponent: Power applied to the evidence age.
        scale: Multiplier applied before truncation.
        grace_period: Seconds added to ``current_time`` before computing age.

    Returns:
        Sum of the per-slot contributions, each truncated toward zero.
    """
    reference = current_time + grace_period
    total = 0
    for ts, points in zip(timestamps, base_points, strict=True):
        if ts == 0:
            continue
        age = max(reference - ts, 1)
        total += int(points * scale / age**decay_exponent)
    return total
