"""Core layer shared by the hint database.

Sits in the middle of the diamond DAG -- depends only on
``relayhints.models`` and is depended upon by ``relayhints.hints``.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][relayhints.core.logger.Logger].
    ConfigurationError: Raised for invalid configuration.
        See [exceptions][relayhints.core.exceptions].
    MetricsConfig: Prometheus metrics settings embedded in the hint
        database configuration.
        See [MetricsConfig][relayhints.core.metrics.MetricsConfig].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][relayhints.core.yaml.load_yaml].
"""

from .exceptions import ConfigurationError, RelayHintsError
from .logger import Logger, StructuredFormatter, configure_logging, format_kv_pairs
from .metrics import (
    HINT_COUNTER,
    HINT_GAUGE,
    QUERY_DURATION_SECONDS,
    MetricsConfig,
    start_metrics_server,
)
from .yaml import load_yaml


__all__ = [
    "HINT_COUNTER",
    "HINT_GAUGE",
    "QUERY_DURATION_SECONDS",
    "ConfigurationError",
    "Logger",
    "MetricsConfig",
    "RelayHintsError",
    "StructuredFormatter",
    "configure_logging",
    "format_kv_pairs",
    "load_yaml",
    "start_metrics_server",
]
