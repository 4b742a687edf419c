from prometheus_client import Counter, Histogram

# Total HTTP requests by method + path
HTTP_REQUESTS_TOTAL = Counter(
    "jwt_inspector_http_requests_total",
    "Total HTTP requests to the JWT inspector",
    ["method", "path"],
)

# Generic request latency by path
HTTP_REQUEST_LATENCY_SECONDS = Histogram(
    "jwt_inspector_http_request_latency_seconds",
    "HTTP request latency (seconds) for the JWT inspector",
    ["path"],
)

VERIFY_LATENCY_SECONDS = Histogram(
    "jwt_inspector_verify_latency_seconds",
    "JWT signature verification latency (seconds)",
)

# Decode outcomes: ok or the parse error reason
DECODE_TOTAL = Counter(
    "jwt_inspector_decode_total",
    "Total decode attempts by outcome",
    ["outcome"],
)

# Verify outcomes: verified / invalid / error / not_verified
VERIFY_TOTAL = Counter(
    "jwt_inspector_verify_total",
    "Total verify attempts by status and algorithm",
    ["status", "alg"],
)
