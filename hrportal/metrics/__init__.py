# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metric objects, defined once and shared.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "hrdash_requests_total",
    "Total HTTP requests to the dashboard service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "hrdash_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "hrdash_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Upstream backend ──
BACKEND_REQUESTS = Counter(
    "hrdash_backend_requests_total",
    "Requests sent to the REST backend",
    ["method", "endpoint", "status"],
)
BACKEND_LATENCY = Histogram(
    "hrdash_backend_request_duration_seconds",
    "Latency of REST backend calls",
    ["method", "endpoint"],
)

# ── Query cache ──
CACHE_HITS = Counter(
    "hrdash_cache_hits_total",
    "Query cache hits",
    ["resource"],
)
CACHE_MISSES = Counter(
    "hrdash_cache_misses_total",
    "Query cache misses (upstream fetches)",
    ["resource"],
)
CACHE_DEDUPLICATED = Counter(
    "hrdash_cache_deduplicated_total",
    "Reads that joined an in-flight fetch",
    ["resource"],
)
CACHE_INVALIDATIONS = Counter(
    "hrdash_cache_invalidations_total",
    "Prefix invalidations after mutations",
    ["resource"],
)

# ── Business metrics ──
MUTATIONS_TOTAL = Counter(
    "hrdash_mutations_total",
    "Create/update/delete operations forwarded to the backend",
    ["resource", "action"],
)
WIZARDS_STARTED = Counter(
    "hrdash_wizards_started_total",
    "Employee creation wizards started",
)
WIZARDS_SUBMITTED = Counter(
    "hrdash_wizards_submitted_total",
    "Employee creation wizards submitted",
    ["outcome"],
)
WIZARD_STEP_BLOCKED = Counter(
    "hrdash_wizard_step_blocked_total",
    "Wizard step transitions blocked by validation",
    ["step"],
)
ACTIVE_WIZARDS = Gauge(
    "hrdash_active_wizards",
    "Number of open wizard sessions",
)


def backend_endpoint(path: str) -> str:
    """Label for a backend path: segments carrying an id (any digit) become ``{id}``."""
    segments = [
        "{id}" if any(ch.isdigit() for ch in segment) else segment
        for segment in path.split("?", 1)[0].split("/")
        if segment
    ]
    return "/" + "/".join(segments)
