"""Hint database configuration models.

Every knob of the scoring heuristic is a field here so deployments can retune
it from YAML without code changes. The defaults reproduce the reference
weights and decay curve, keeping scores comparable across implementations.

Examples:
    ```yaml
    name: profiles
    base_points:
      last_in_relay_list: 500   # other keys keep their defaults
    decay_exponent: 1.3
    grace_period: 86400
    metrics:
      enabled: true
    ```

See Also:
    [MemoryHintDB][relayhints.hints.memory.MemoryHintDB]: The store that
        consumes this configuration.
    [score()][relayhints.hints.scoring.score]: The decay function
        parameterized by these fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from relayhints.core.metrics import MetricsConfig
from relayhints.models.constants import HintKey


#: Multiplier keeping per-key contributions meaningful after int truncation.
DEFAULT_SCALE = 10_000_000_000

#: Exponent of the power-law decay applied to evidence age.
DEFAULT_DECAY_EXPONENT = 1.3

#: Seconds added to "now" so fresh evidence does not produce runaway scores.
DEFAULT_GRACE_PERIOD = 24 * 60 * 60


def _default_base_points() -> dict[HintKey, int]:
    return {key: key.base_points for key in HintKey}


def _coerce_key(raw: Any) -> HintKey:
    if isinstance(raw, HintKey):
        return raw
    if isinstance(raw, str):
        return HintKey.from_name(raw)
    return HintKey(raw)


class HintDBConfig(BaseModel):
    """Configuration for [MemoryHintDB][relayhints.hints.memory.MemoryHintDB].

    ``base_points`` accepts partial overrides keyed by ``HintKey`` member,
    lowercase name or slot index; unspecified keys keep their defaults.
    """

    name: str = Field(
        default="default",
        min_length=1,
        description="Store identifier, used as the ``store`` metrics label",
    )
    base_points: dict[HintKey, int] = Field(
        default_factory=_default_base_points,
        description="Positive weight per evidence category",
    )
    decay_exponent: float = Field(
        default=DEFAULT_DECAY_EXPONENT,
        gt=0.0,
        description="Power applied to evidence age in the decay denominator",
    )
    scale: float = Field(
        default=DEFAULT_SCALE,
        gt=0.0,
        description="Constant multiplier applied before int truncation",
    )
    grace_period: int = Field(
        default=DEFAULT_GRACE_PERIOD,
        ge=0,
        description="Seconds added to now before computing evidence age",
    )
    metrics: MetricsConfig = Field(
        default_factory=MetricsConfig,
        description="Prometheus metrics configuration",
    )

    @field_validator("base_points", mode="before")
    @classmethod
    def merge_base_points(cls, v: Any) -> dict[HintKey, Any]:
        if not isinstance(v, Mapping):
            raise ValueError(f"base_points must be a mapping, got {type(v).__name__}")
        merged: dict[HintKey, Any] = _default_base_points()
        for raw_key, points in v.items():
            merged[_coerce_key(raw_key)] = points
        return merged

    @field_validator("base_points")
    @classmethod
    def base_points_positive(cls, v: dict[HintKey, int]) -> dict[HintKey, int]:
        invalid = [str(key) for key, points in v.items() if points <= 0]
        if invalid:
            raise ValueError(f"base_points must be positive: {', '.join(invalid)}")
        return v

    def points_by_slot(self) -> tuple[int, ...]:
        """Base points ordered by ``HintKey`` value, for index-based scoring."""
        return tuple(self.base_points[key] for key in HintKey)
