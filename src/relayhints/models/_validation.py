"""Shared validation helpers for frozen dataclass models.

Private module — not part of the public API. Used by ``__post_init__``
methods in sibling model modules to enforce runtime type constraints.
"""

from __future__ import annotations

from typing import Any


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_timestamp(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an ``int`` (``bool`` excluded).

    Any int is accepted, negative included: the hint database stores caller
    timestamps unvalidated, and a record built from stored state must never
    fail to construct.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def validate_timestamp_slots(value: Any, count: int, name: str) -> None:
    """Raise if *value* is not a tuple of exactly *count* int timestamps.

    Slot ``i`` holds the latest observation for ``HintKey(i)``; zero means
    the key was never observed.
    """
    validate_instance(value, tuple, name)
    if len(value) != count:
        raise ValueError(f"{name} must have {count} slots, got {len(value)}")
    for i, ts in enumerate(value):
        validate_timestamp(ts, f"{name}[{i}]")
