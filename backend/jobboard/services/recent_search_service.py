"""Recent search history."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.db import RecentSearch, User
from jobboard.domain.query import parse_filter_params, to_filter_params
from jobboard.repositories import RecentSearchRepository
from jobboard.schemas.recent_search import RecentSearchCreate

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=30)
RECENT_LIST_LIMIT = 10
RECENT_KEEP = 20


class RecentSearchService:
    """Records the searches a user runs and lists the latest ones."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.searches = RecentSearchRepository(session)

    def list_recent(self, user: User, now: Optional[datetime] = None) -> Sequence[RecentSearch]:
        now = now or datetime.utcnow()
        return self.searches.list_since(user.id, now - RECENT_WINDOW, RECENT_LIST_LIMIT)

    def record(self, payload: RecentSearchCreate, user: User) -> RecentSearch:
        """Store a search, replacing an older one with the same query and location."""
        raw = dict(payload.filters)
        if payload.query.strip():
            raw["query"] = payload.query
        if payload.location.strip():
            raw["location"] = payload.location
        filters = parse_filter_params(raw)
        query, location = filters.query[:255], filters.location[:100]

        self.searches.delete_matching(user.id, query, location)
        search = RecentSearch(
            user_id=user.id,
            query=query,
            location=location,
            filters=to_filter_params(filters),
        )
        self.searches.add(search)
        self.searches.flush()
        pruned = self.searches.prune(user.id, RECENT_KEEP)
        self.searches.commit()
        self.searches.refresh(search)
        logger.debug(
            "Recent search recorded",
            extra={"user_id": user.id, "recent_search_id": search.id, "pruned": pruned},
        )
        return search
