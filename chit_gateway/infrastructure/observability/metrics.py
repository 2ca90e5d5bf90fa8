"""Prometheus metrics for monitoring previews, chit creation, and request latency"""

from prometheus_client import Counter, Histogram

# Regime metrics
preview_counter = Counter(
    "chit_preview_total",
    "Total schedule previews computed",
    ["regime"],  # early-takers-benefit | rosca-mode | standard-chit
)

chit_created_counter = Counter(
    "chit_created_total",
    "Total chits created",
    ["regime"],
)

members_count_histogram = Histogram(
    "chit_members_count",
    "Group size of created chits",
    buckets=[2, 5, 10, 15, 20, 30, 50, 100],
)

schedule_generation_histogram = Histogram(
    "chit_schedule_generation_seconds",
    "Time spent generating a chit schedule",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_preview(regime: str) -> None:
    """Record a computed preview by regime"""
    preview_counter.labels(regime=regime).inc()


def record_chit_created(regime: str, members_count: int) -> None:
    """Record chit creation for regime mix and group size distribution"""
    chit_created_counter.labels(regime=regime).inc()
    members_count_histogram.observe(members_count)
