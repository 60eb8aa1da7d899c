"""relayhints exception hierarchy.

The hint database itself never raises for reachable inputs: unknown pubkeys,
future timestamps, stale writes and oversized queries are all resolved by
policy. Exceptions exist only at the edges, where configuration is loaded.

Exception hierarchy:

```text
RelayHintsError (base -- never raised directly)
└── ConfigurationError      -- config validation, missing keys, bad YAML
```

See Also:
    [load_yaml()][relayhints.core.yaml.load_yaml]: Raises
        [ConfigurationError][relayhints.core.exceptions.ConfigurationError]
        on malformed YAML.
    [MemoryHintDB.from_dict()][relayhints.hints.memory.MemoryHintDB.from_dict]:
        Wraps Pydantic validation failures in
        [ConfigurationError][relayhints.core.exceptions.ConfigurationError].
"""

from __future__ import annotations


class RelayHintsError(Exception):
    """Base exception for all relayhints errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(RelayHintsError):
    """Invalid or missing configuration (YAML file, dict, field values).

    See Also:
        [RelayHintsError][relayhints.core.exceptions.RelayHintsError]: Parent
            exception class.
        [HintDBConfig][relayhints.hints.configs.HintDBConfig]: The Pydantic
            model whose validation errors are wrapped by this exception.
    """
