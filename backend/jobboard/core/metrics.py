"""Prometheus metrics for the Job Board API.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count, in-flight)
- Search metrics (listing requests per sort key, result counts)
- Saved search and saved job activity
- Alert processing (searches processed, jobs matched)
"""

from prometheus_client import Counter, Gauge, Histogram, Info

# Application info
APP_INFO = Info("jobboard_app", "Job board application information")

# HTTP Request metrics
HTTP_REQUESTS_TOTAL = Counter(
    "jobboard_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobboard_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "jobboard_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

# Search metrics
SEARCH_REQUESTS_TOTAL = Counter(
    "jobboard_search_requests_total",
    "Total job listing requests",
    ["sort_by"],
)

SEARCH_RESULTS = Histogram(
    "jobboard_search_results",
    "Total matches reported per listing request",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000),
)

SEARCH_FACETS_USED = Counter(
    "jobboard_search_facets_used_total",
    "Facets constrained in listing requests",
    ["facet"],
)

# Saved items
SAVED_SEARCH_EVENTS_TOTAL = Counter(
    "jobboard_saved_search_events_total",
    "Saved search lifecycle events",
    ["event"],  # created, updated, deleted
)

SAVED_JOB_EVENTS_TOTAL = Counter(
    "jobboard_saved_job_events_total",
    "Saved job events",
    ["event"],  # saved, removed
)

# Alert processing
ALERT_SEARCHES_PROCESSED_TOTAL = Counter(
    "jobboard_alert_searches_processed_total",
    "Saved searches evaluated by the alert processor",
    ["outcome"],  # alerted, no_matches, skipped
)

ALERT_JOBS_MATCHED_TOTAL = Counter(
    "jobboard_alert_jobs_matched_total",
    "Jobs matched by saved-search alerts",
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric."""
    APP_INFO.info({"version": version, "environment": environment})


def record_search(sort_by: str, total: int, facets: list[str]) -> None:
    """Record one listing request.

    Args:
        sort_by: Sort key the request used.
        total: Total number of matches (not the page length).
        facets: Wire names of the facets the request constrained.
    """
    SEARCH_REQUESTS_TOTAL.labels(sort_by=sort_by).inc()
    SEARCH_RESULTS.observe(total)
    for facet in facets:
        SEARCH_FACETS_USED.labels(facet=facet).inc()


def record_saved_search_event(event: str) -> None:
    SAVED_SEARCH_EVENTS_TOTAL.labels(event=event).inc()


def record_saved_job_event(event: str) -> None:
    SAVED_JOB_EVENTS_TOTAL.labels(event=event).inc()


def record_alert_outcome(outcome: str, jobs_matched: int = 0) -> None:
    """Record the result of evaluating one saved search for alerts."""
    ALERT_SEARCHES_PROCESSED_TOTAL.labels(outcome=outcome).inc()
    if jobs_matched:
        ALERT_JOBS_MATCHED_TOTAL.inc(jobs_matched)
