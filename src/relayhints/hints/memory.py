"""
In-memory, thread-safe hint database.

Tracks, for every pubkey, which relays have been linked to it and when, and
ranks those relays with the recency-weighted [score()][relayhints.hints.scoring.score].
The store is a best-effort hint cache: nothing is persisted, nothing is
validated, and nothing is ever evicted.

State:

```text
RelayTable        relay URL <-> serial (append-only, shared by all pubkeys)
_entries          pubkey -> _PubkeyHints
  _PubkeyHints      ordered list of RelayEntry + serial index
    RelayEntry        serial + one timestamp slot per HintKey
```

Every public operation runs under a single ``threading.Lock`` that covers
both the relay table and the per-pubkey entries, so concurrent callers can
never intern the same URL twice or observe a half-sorted list.

Examples:
    ```python
    db = MemoryHintDB()
    db.save(pubkey, "wss://relay.damus.io", HintKey.LAST_IN_RELAY_LIST, created_at)
    db.save(pubkey, "wss://nos.lol", HintKey.MOST_RECENT_EVENT_FETCHED, received_at)
    db.top_n(pubkey, 2)   # ['wss://nos.lol', 'wss://relay.damus.io']
    ```
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Self, TextIO

from pydantic import ValidationError

from relayhints.core.exceptions import ConfigurationError
from relayhints.core.logger import Logger
from relayhints.core.metrics import HINT_COUNTER, HINT_GAUGE, QUERY_DURATION_SECONDS
from relayhints.core.yaml import load_yaml
from relayhints.models.constants import HINT_KEY_COUNT, HintKey
from relayhints.models.relay_scores import RelayScores

from .base import BaseHintDB
from .configs import HintDBConfig
from .relay_table import RelayTable
from .scoring import now, score


@dataclass(slots=True)
class RelayEntry:
    """Evidence for one (pubkey, relay) pair.

    ``timestamps[key]`` is the latest time ``key`` was observed for the
    relay, ``0`` if never.
    """

    serial: int
    timestamps: list[int] = field(default_factory=lambda: [0] * HINT_KEY_COUNT)


@dataclass(slots=True)
class _PubkeyHints:
    # ``entries`` order is observable (print_scores); ``by_serial`` is lookup only
    entries: list[RelayEntry] = field(default_factory=list)
    by_serial: dict[int, RelayEntry] = field(default_factory=dict)


class MemoryHintDB(BaseHintDB):
    """Thread-safe in-memory implementation of [BaseHintDB][relayhints.hints.base.BaseHintDB].

    Attributes:
        _config: Scoring weights, decay parameters and metrics switch.
        _clock: Zero-argument callable returning the current Unix time in
            seconds. Injectable for deterministic tests.
        _relays: [RelayTable][relayhints.hints.relay_table.RelayTable]
            interning every relay URL seen.
        _entries: Per-pubkey evidence, in insertion order between sorts.
        _lock: Guards ``_relays`` and ``_entries``.
        _logger: [Logger][relayhints.core.logger.Logger] named ``hints``.

    See Also:
        [HintDBConfig][relayhints.hints.configs.HintDBConfig]: Configuration
            model accepted by the constructor and factories.
    """

    def __init__(
        self,
        config: HintDBConfig | None = None,
        *,
        clock: Callable[[], int] = now,
    ) -> None:
        self._config = config if config is not None else HintDBConfig()
        self._clock = clock
        self._points = self._config.points_by_slot()
        self._relays = RelayTable()
        self._entries: dict[str, _PubkeyHints] = {}
        self._lock = threading.Lock()
        self._logger = Logger("hints")

        self._logger.info(
            "hint_db_created",
            store=self._config.name,
            decay_exponent=self._config.decay_exponent,
            grace_period=self._config.grace_period,
            metrics=self._config.metrics.enabled,
        )

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> Self:
        """Create a hint database from a configuration dictionary.

        Args:
            data: Configuration dictionary parsed into
                [HintDBConfig][relayhints.hints.configs.HintDBConfig].
            **kwargs: Additional keyword arguments passed to the constructor.

        Raises:
            ConfigurationError: If ``data`` fails validation.
        """
        try:
            config = HintDBConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hint database configuration: {e}") from e
        return cls(config=config, **kwargs)

    @classmethod
    def from_yaml(cls, config_path: str, **kwargs: Any) -> Self:
        """Create a hint database from a YAML configuration file.

        Delegates to [load_yaml()][relayhints.core.yaml.load_yaml] and
        [from_dict()][relayhints.hints.memory.MemoryHintDB.from_dict].
        """
        return cls.from_dict(load_yaml(config_path), **kwargs)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> HintDBConfig:
        """The scoring configuration (read-only)."""
        return self._config

    @property
    def relay_count(self) -> int:
        """Number of distinct relay URLs interned so far."""
        with self._lock:
            return len(self._relays)

    def pubkeys(self) -> list[str]:
        """Tracked pubkeys in first-seen order."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # -------------------------------------------------------------------------
    # Write Path
    # -------------------------------------------------------------------------

    def save(self, pubkey: str, relay: str, key: HintKey, ts: int) -> None:
        """Record that ``relay`` was linked to ``pubkey`` by ``key`` at ``ts``.

        Timestamps in the future are clamped to now. Only strictly newer
        timestamps replace a stored one; older or equal writes are dropped
        without touching the store.

        Args:
            pubkey: Participant identity the relay is linked to.
            relay: Relay URL, used verbatim as its identity.
            key: Evidence category.
            ts: Unix timestamp of the observation. Fractional seconds are
                truncated.
        """
        ts = int(ts)
        current = self._clock()
        if ts > current:
            self._inc_counter("clamped")
            ts = current

        with self._lock:
            serial = self._intern(relay)

            hints = self._entries.get(pubkey)
            if hints is None:
                hints = self._entries[pubkey] = _PubkeyHints()
                self._set_gauge("pubkeys", len(self._entries))

            entry = hints.by_serial.get(serial)
            if entry is None:
                entry = RelayEntry(serial=serial)
                entry.timestamps[key] = ts
                hints.entries.append(entry)
                hints.by_serial[serial] = entry
                outcome = "saved"
            elif entry.timestamps[key] >= ts:
                self._inc_counter("stale")
                if self._logger.is_enabled_for(logging.DEBUG):
                    self._logger.debug(
                        "hint_stale",
                        pubkey=pubkey,
                        relay=relay,
                        key=str(key),
                        ts=ts,
                        stored=entry.timestamps[key],
                    )
                return
            else:
                entry.timestamps[key] = ts
                outcome = "updated"

        self._inc_counter(outcome)
        if self._logger.is_enabled_for(logging.DEBUG):
            self._logger.debug(
                f"hint_{outcome}", pubkey=pubkey, relay=relay, key=str(key), ts=ts
            )

    def _intern(self, relay: str) -> int:
        # caller holds self._lock
        size = len(self._relays)
        serial = self._relays.intern(relay)
        if len(self._relays) != size:
            self._set_gauge("relays", len(self._relays))
            if self._logger.is_enabled_for(logging.DEBUG):
                self._logger.debug("relay_interned", relay=relay, serial=serial)
        return serial

    # -------------------------------------------------------------------------
    # Read Path
    # -------------------------------------------------------------------------

    def top_n(self, pubkey: str, n: int) -> list[str]:
        """Best ``n`` relay URLs for ``pubkey``, highest score first.

        Re-sorts the pubkey's relays from scratch on every call; the new
        order persists until the next sort. Unknown pubkeys and ``n <= 0``
        yield an empty list, and fewer than ``n`` known relays yield a
        shorter list.
        """
        start = time.perf_counter()
        with self._lock:
            ranked = self._rank(pubkey)
            result = [self._relays.url(entry.serial) for entry, _ in ranked[: max(n, 0)]]
        self._observe("top_n", start)
        return result

    def get_detailed_scores(self, pubkey: str, n: int) -> list[RelayScores]:
        """Best ``n`` relays for ``pubkey`` with per-key timestamps and total score.

        Same ordering and edge cases as
        [top_n()][relayhints.hints.memory.MemoryHintDB.top_n].
        """
        start = time.perf_counter()
        with self._lock:
            ranked = self._rank(pubkey)
            result = [
                RelayScores(
                    relay=self._relays.url(entry.serial),
                    timestamps=tuple(entry.timestamps),
                    sum=total,
                )
                for entry, total in ranked[: max(n, 0)]
            ]
        self._observe("get_detailed_scores", start)
        return result

    def _rank(self, pubkey: str) -> list[tuple[RelayEntry, int]]:
        # caller holds self._lock
        hints = self._entries.get(pubkey)
        if hints is None:
            return []

        current = self._clock()
        scored = [(entry, self._score(entry, current)) for entry in hints.entries]
        # Descending score, ties by first-interned relay
        scored.sort(key=lambda item: (-item[1], item[0].serial))
        hints.entries[:] = [entry for entry, _ in scored]
        return scored

    def _score(self, entry: RelayEntry, current: int) -> int:
        return score(
            entry.timestamps,
            self._points,
            current,
            decay_exponent=self._config.decay_exponent,
            scale=self._config.scale,
            grace_period=self._config.grace_period,
        )

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def print_scores(self, file: TextIO | None = None) -> None:
        """Write every pubkey's relays with their current scores.

        Relays are listed in their stored order (as left by the last query),
        not re-sorted. Output goes to ``file`` or ``sys.stdout``.
        """
        out = file if file is not None else sys.stdout
        with self._lock:
            current = self._clock()
            print("= print scores", file=out)
            for pubkey, hints in self._entries.items():
                print("== relay scores for", pubkey, file=out)
                for i, entry in enumerate(hints.entries):
                    url = self._relays.url(entry.serial)
                    total = self._score(entry, current)
                    print(f"  {i:3d} :: {url:>30s} ({entry.serial:3d}) ::> {total:12d}", file=out)

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    # Every series carries ``store=config.name`` so several stores in one
    # process report separately.

    def _inc_counter(self, name: str) -> None:
        if self._config.metrics.enabled:
            HINT_COUNTER.labels(store=self._config.name, name=name).inc()

    def _set_gauge(self, name: str, value: float) -> None:
        if self._config.metrics.enabled:
            HINT_GAUGE.labels(store=self._config.name, name=name).set(value)

    def _observe(self, query: str, start: float) -> None:
        if self._config.metrics.enabled:
            QUERY_DURATION_SECONDS.labels(store=self._config.name, query=query).observe(
                time.perf_counter() - start
            )
