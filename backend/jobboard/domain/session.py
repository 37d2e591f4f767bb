"""Client-side search session.

Ties the filter state, the paginator and the latest listing result together.
Every listing fetch is tagged with a sequence number; a response is applied
only if no newer request has been issued since, so a slow stale response can
never overwrite fresher results.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Hashable, Mapping, Optional

from jobboard.core.logging import get_logger
from jobboard.domain.cards import JobCard
from jobboard.domain.exceptions import ListingFetchError, ValidationError
from jobboard.domain.filters import SearchFilters
from jobboard.domain.pagination import Paginator
from jobboard.domain.query import to_query_params

logger = get_logger(__name__)

VIEW_MODES = ("grid", "list")


def _listing_page(payload: Any) -> tuple[list[dict[str, Any]], int]:
    """Jobs and total from a listing body; raises ListingFetchError on a bad shape."""
    if not isinstance(payload, Mapping):
        raise ListingFetchError("Malformed listing response: expected an object")
    jobs = payload.get("jobs") or []
    if not isinstance(jobs, list) or not all(isinstance(job, Mapping) for job in jobs):
        raise ListingFetchError("Malformed listing response: jobs must be a list of objects")
    try:
        total = int(payload.get("total") or 0)
    except (TypeError, ValueError):
        raise ListingFetchError("Malformed listing response: total is not a number") from None
    if total < 0:
        raise ListingFetchError("Malformed listing response: negative total")
    return [dict(job) for job in jobs], total


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ListingRequest:
    sequence: int
    page: int
    params: dict[str, str]


class SearchSession:
    """State behind one search results page."""

    def __init__(self, filters: Optional[SearchFilters] = None, page_size: int = 12) -> None:
        self.filters = filters or SearchFilters()
        self.paginator = Paginator(page_size=page_size)
        self.jobs: list[dict[str, Any]] = []
        self.saved_jobs: set[Hashable] = set()
        self.view_mode = "grid"
        self.state = LoadState.IDLE
        self.error: Optional[str] = None
        self._last_sequence = 0

    # ------------------------------------------------------------------
    # Filters (every change goes back to page 1)

    def update_filter(self, key: str, value: Any) -> None:
        self.filters.update_filter(key, value)
        self.paginator.reset()

    def toggle_array_filter(self, key: str, value: Any) -> None:
        self.filters.toggle_array_filter(key, value)
        self.paginator.reset()

    def clear_filters(self) -> None:
        self.filters.clear_filters()
        self.paginator.reset()

    def replace_filters(self, filters: SearchFilters) -> None:
        self.filters = filters
        self.paginator.reset()

    # ------------------------------------------------------------------
    # Pagination

    @property
    def current_page(self) -> int:
        return self.paginator.current_page

    @property
    def total(self) -> int:
        return self.paginator.total

    @property
    def total_pages(self) -> int:
        return self.paginator.total_pages

    def page_window(self) -> list[int]:
        return self.paginator.page_window()

    def next_page(self) -> int:
        return self.paginator.next()

    def previous_page(self) -> int:
        return self.paginator.previous()

    def go_to_page(self, page: int) -> int:
        return self.paginator.go_to(page)

    # ------------------------------------------------------------------
    # Request lifecycle

    def query_params(self) -> dict[str, str]:
        return to_query_params(
            self.filters,
            page=self.paginator.current_page,
            limit=self.paginator.page_size,
        )

    def begin_request(self) -> ListingRequest:
        self._last_sequence += 1
        self.state = LoadState.LOADING
        return ListingRequest(
            sequence=self._last_sequence,
            page=self.paginator.current_page,
            params=self.query_params(),
        )

    def is_current(self, request: ListingRequest) -> bool:
        return request.sequence == self._last_sequence

    def apply_response(self, request: ListingRequest, payload: Any) -> bool:
        """Apply a listing response; returns False when it was superseded.

        A body that is not a listing object is recorded as a failure.
        """
        if not self.is_current(request):
            logger.debug(
                "Discarding stale listing response",
                extra={"sequence": request.sequence, "latest": self._last_sequence},
            )
            return False
        try:
            jobs, total = _listing_page(payload)
        except ListingFetchError as exc:
            return self.apply_failure(request, exc)
        self.jobs = jobs
        self.paginator.update_total(total)
        self.error = None
        self.state = LoadState.LOADED if self.jobs else LoadState.EMPTY
        return True

    def apply_failure(self, request: ListingRequest, error: Exception) -> bool:
        """Record a failed fetch. Previous results stay visible next to the error."""
        if not self.is_current(request):
            return False
        self.error = str(error) or error.__class__.__name__
        self.state = LoadState.ERROR
        logger.warning(
            "Listing request failed",
            extra={"sequence": request.sequence, "error": self.error},
        )
        return True

    # ------------------------------------------------------------------
    # UI-only state

    def toggle_saved(self, job_id: Hashable) -> bool:
        """Optimistically flip the saved marker; returns the new value."""
        if job_id in self.saved_jobs:
            self.saved_jobs.discard(job_id)
            return False
        self.saved_jobs.add(job_id)
        return True

    def set_view_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            raise ValidationError(f"Unknown view mode: {mode}")
        self.view_mode = mode

    def cards(self, now: Optional[datetime] = None) -> list[JobCard]:
        return [
            JobCard.from_summary(job, saved=job.get("id") in self.saved_jobs, now=now)
            for job in self.jobs
        ]
