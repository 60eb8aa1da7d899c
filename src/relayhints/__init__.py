r"""relayhints -- Recency-ranked relay hints for Nostr pubkeys.

An in-process, thread-safe cache remembering which relays were seen serving
or receiving data for each pubkey, and ranking them so clients know where to
look first. Hints are advisory and may be stale or wrong.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
              hints            Interning, evidence table, scoring, queries
                |
              core             Logging, exceptions, YAML, Prometheus metrics
                |
              models           Pure dataclasses and enums (zero I/O)
```

Note:
    Top-level imports (``from relayhints import MemoryHintDB``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("relayhints")

__all__ = [
    "BaseHintDB",
    "ConfigurationError",
    "HintDBConfig",
    "HintKey",
    "Logger",
    "MemoryHintDB",
    "MetricsConfig",
    "RelayHintsError",
    "RelayScores",
    "RelayTable",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("relayhints.core", "ConfigurationError"),
    "Logger": ("relayhints.core", "Logger"),
    "MetricsConfig": ("relayhints.core", "MetricsConfig"),
    "RelayHintsError": ("relayhints.core", "RelayHintsError"),
    "HintKey": ("relayhints.models", "HintKey"),
    "RelayScores": ("relayhints.models", "RelayScores"),
    "BaseHintDB": ("relayhints.hints", "BaseHintDB"),
    "HintDBConfig": ("relayhints.hints", "HintDBConfig"),
    "MemoryHintDB": ("relayhints.hints", "MemoryHintDB"),
    "RelayTable": ("relayhints.hints", "RelayTable"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'relayhints' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
