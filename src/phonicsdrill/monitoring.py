"""Monitoring configuration for the drill."""
from prometheus_client import Counter, Gauge, start_http_server

# Catalog metrics
catalog_words = Gauge(
    "phonicsdrill_catalog_words",
    "Number of words in the loaded catalog",
)

# Drill metrics
judgments_recorded = Counter(
    "phonicsdrill_judgments_total",
    "Total number of judgments recorded",
    ["result"],
)

sessions_started = Counter(
    "phonicsdrill_sessions_started_total",
    "Total number of drill sessions started",
    ["mode"],
)

sessions_finished = Counter(
    "phonicsdrill_sessions_finished_total",
    "Total number of drill sessions that reached the end",
    ["mode"],
)

# Progress metrics
progress_resets = Counter(
    "phonicsdrill_progress_resets_total",
    "Total number of progress reset operations",
    ["scope"],
)

# Error metrics
storage_errors = Counter(
    "phonicsdrill_storage_errors_total",
    "Total number of progress storage failures",
    ["operation"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
