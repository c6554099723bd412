"""Prometheus metrics shared across the application."""

from prometheus_client import Counter, Histogram

REQUESTS_TOTAL = Counter(
    "content_hub_http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "path"],
)

RESPONSES_TOTAL = Counter(
    "content_hub_http_responses_total",
    "Total number of HTTP responses",
    labelnames=["status_code"],
)

REQUEST_DURATION = Histogram(
    "content_hub_http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=["method", "path"],
)

SYNC_RUNS_TOTAL = Counter(
    "content_hub_sync_runs_total",
    "Number of content sync runs",
    labelnames=["trigger", "outcome"],
)

CHAT_REQUESTS_TOTAL = Counter(
    "content_hub_chat_requests_total",
    "Number of chat completions requested",
    labelnames=["outcome"],
)
