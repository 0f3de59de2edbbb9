"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "gardien_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "gardien_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "gardien_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Secret Release Metrics
# ============================================================

secret_release_total = Counter(
    "gardien_secret_release_total",
    "Secret release decisions by outcome",
    ["outcome"],
)

configured_secrets = Gauge(
    "gardien_configured_secrets",
    "Number of IPIDs with a configured secret",
)

# ============================================================
# Blockchain Metrics
# ============================================================

ledger_lookup_duration_seconds = Histogram(
    "gardien_ledger_lookup_duration_seconds",
    "Ledger account lookup duration in seconds",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

ledger_errors_total = Counter(
    "gardien_ledger_errors_total",
    "Total ledger lookup failures",
    ["error_type"],
)
