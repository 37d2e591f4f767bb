"""API module initialization."""

from . import (
    alerts,
    jobs,
    listing,
    metrics,
    recent_searches,
    saved_jobs,
    saved_searches,
    search,
)

__all__ = [
    "alerts",
    "jobs",
    "listing",
    "metrics",
    "recent_searches",
    "saved_jobs",
    "saved_searches",
    "search",
]
