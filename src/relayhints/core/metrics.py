"""
Prometheus metrics for the hint database.

Defines module-level metric objects (singletons, thread-safe) shared by every
hint database in the process. Stores record through them only when
``MetricsConfig.enabled`` is set, so embedding applications that do not scrape
Prometheus pay nothing.

Architecture:
    HINT_COUNTER:               Cumulative totals of save outcomes.
    HINT_GAUGE:                 Point-in-time sizes (interned relays, pubkeys).
    QUERY_DURATION_SECONDS:     Histogram of ranked query latency.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram, start_http_server
from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class MetricsConfig(BaseModel):
    """Configuration for hint database metrics.

    ``enabled`` gates recording. ``port``/``host`` are only used by
    [start_metrics_server()][relayhints.core.metrics.start_metrics_server]
    when the embedding application has no exposition endpoint of its own.
    """

    enabled: bool = Field(default=False, description="Enable metrics collection")
    port: int = Field(default=8000, ge=1024, le=65535, description="Metrics HTTP port")
    host: str = Field(default="127.0.0.1", description="Metrics HTTP bind address")


# ---------------------------------------------------------------------------
# Hint Database Metrics
#
# Every series is labelled with store=HintDBConfig.name so several stores in
# one process keep separate gauges.
#
# counter: {name="saved"}    new (pubkey, relay) evidence record created
#          {name="updated"}  existing record moved to a newer timestamp
#          {name="stale"}    write dropped, stored timestamp already newer
#          {name="clamped"}  future timestamp clamped to now
# gauge:   {name="relays"}   interned relay URLs
#          {name="pubkeys"}  tracked pubkeys
# ---------------------------------------------------------------------------

HINT_COUNTER = Counter(
    "hint_counter",
    "Hint database counter values (cumulative totals)",
    ["store", "name"],
)

HINT_GAUGE = Gauge(
    "hint_gauge",
    "Hint database gauge values (point-in-time state)",
    ["store", "name"],
)

QUERY_DURATION_SECONDS = Histogram(
    "hint_query_duration_seconds",
    "Duration of ranked hint queries in seconds",
    ["store", "query"],
    buckets=(0.00001, 0.0001, 0.001, 0.01, 0.1, 1),
)


def start_metrics_server(config: MetricsConfig | None = None) -> bool:
    """Expose the default Prometheus registry over HTTP in a daemon thread.

    Args:
        config: Metrics configuration. Uses defaults if not provided.

    Returns:
        True if the server was started, False if metrics are disabled.

    Raises:
        OSError: If the port is already in use or binding fails.
    """
    config = config or MetricsConfig()
    if not config.enabled:
        return False
    start_http_server(config.port, addr=config.host)
    return True
