"""Saved search services."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.core.metrics import record_saved_search_event
from jobboard.db import SavedSearch, User
from jobboard.domain.exceptions import NotFoundError
from jobboard.domain.filters import SearchFilters
from jobboard.domain.query import ListingQuery, parse_filter_params, to_filter_params
from jobboard.repositories import SavedSearchRepository
from jobboard.schemas.job import JobListResponse
from jobboard.schemas.saved_search import SavedSearchCreate, SavedSearchUpdate
from jobboard.services.search_service import SearchService

logger = logging.getLogger(__name__)


def filters_of(saved: SavedSearch) -> SearchFilters:
    """Rebuild the filter state stored on a saved search."""
    return parse_filter_params(saved.filters or {})


class SavedSearchService:
    """Business logic around a user's saved searches."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.searches = SavedSearchRepository(session)

    def list_searches(self, user: User) -> Sequence[SavedSearch]:
        return self.searches.list_for_user(user.id)

    def get_search(self, search_id: int, user: User) -> SavedSearch:
        saved = self.searches.get_for_user(search_id, user.id)
        if saved is None:
            raise NotFoundError("Saved search not found")
        return saved

    def create_search(self, payload: SavedSearchCreate, user: User) -> SavedSearch:
        saved = SavedSearch(
            user_id=user.id,
            name=payload.name,
            alert_enabled=payload.alert_enabled,
            alert_frequency=payload.alert_frequency,
        )
        self._store_filters(saved, payload.filters)
        self.searches.add(saved)
        self.searches.commit()
        self.searches.refresh(saved)
        record_saved_search_event("created")
        logger.info(
            "Saved search created",
            extra={"saved_search_id": saved.id, "user_id": user.id, "alert": saved.alert_enabled},
        )
        return saved

    def update_search(
        self, search_id: int, payload: SavedSearchUpdate, user: User
    ) -> SavedSearch:
        saved = self.get_search(search_id, user)
        update_data = payload.model_dump(exclude_unset=True)
        filters = update_data.pop("filters", None)
        if filters is not None:
            self._store_filters(saved, filters)
        for key, value in update_data.items():
            if value is not None:
                setattr(saved, key, value)
        self.searches.commit()
        self.searches.refresh(saved)
        record_saved_search_event("updated")
        return saved

    def delete_search(self, search_id: int, user: User) -> None:
        saved = self.get_search(search_id, user)
        self.searches.remove(saved)
        self.searches.commit()
        record_saved_search_event("deleted")

    def run_search(
        self,
        search_id: int,
        user: User,
        *,
        page: int = 1,
        limit: int = 12,
        now: Optional[datetime] = None,
    ) -> JobListResponse:
        saved = self.get_search(search_id, user)
        listing = ListingQuery(filters=filters_of(saved), page=page, limit=limit)
        return SearchService(self.session).list_jobs(listing, now=now)

    @staticmethod
    def _store_filters(saved: SavedSearch, raw: dict) -> None:
        # Round-trip through the translator: unknown keys and defaults drop out.
        filters = parse_filter_params(raw or {})
        saved.filters = to_filter_params(filters)
        saved.query = filters.query or None
        saved.location = filters.location or None
