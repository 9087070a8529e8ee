"""Application metrics using the Prometheus client library.

Single inventory of everything the service measures.  Other modules
import specific metrics and increment/observe them at the point of action.

Counters only go up; Prometheus derives rates with rate().  The duration
histogram lets Prometheus compute percentiles:

  histogram_quantile(0.95, rate(http_request_duration_seconds_bucket[5m]))
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# ---------------------------------------------------------------------------
# HTTP metrics (populated by the MetricsMiddleware)
# ---------------------------------------------------------------------------

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status code",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# ---------------------------------------------------------------------------
# Purchase flow metrics
# ---------------------------------------------------------------------------

PURCHASE_ORDERS = Counter(
    "purchase_orders_total",
    "Purchase orders requested, by outcome",
    ["result"],  # created|already_purchased|failed
)

PAYMENT_VERIFICATIONS = Counter(
    "payment_verifications_total",
    "Payment verification attempts, by outcome",
    ["result"],  # verified|rejected
)

PURCHASES_COMPLETED = Counter(
    "purchases_completed_total",
    "Purchase completions, by outcome",
    ["result"],  # recorded|already_recorded|failed
)
