"""
Prometheus metrics for the embed license service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License metrics
licenses_generated_total = Counter(
    "licenses_generated_total",
    "Total license tokens generated",
)

license_validations_total = Counter(
    "license_validations_total",
    "Total license validations by outcome",
    ["status"],
)

license_decode_failures_total = Counter(
    "license_decode_failures_total",
    "Total license tokens that could not be decoded",
)

# Embed delivery metrics
embed_nonces_issued_total = Counter(
    "embed_nonces_issued_total",
    "Total CSP nonces issued for embed responses",
)

embed_template_errors_total = Counter(
    "embed_template_errors_total",
    "Total embed template load failures",
    ["reason"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
