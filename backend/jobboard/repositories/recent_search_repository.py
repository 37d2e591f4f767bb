"""Recent search persistence helpers."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy.orm import Session

from jobboard.db import RecentSearch
from jobboard.repositories.base import SQLAlchemyRepository


class RecentSearchRepository(SQLAlchemyRepository[RecentSearch]):
    """Encapsulates recent search queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def _for_user(self, user_id: int):
        return self.session.query(RecentSearch).filter(RecentSearch.user_id == user_id)

    def list_since(self, user_id: int, since: datetime, limit: int) -> Sequence[RecentSearch]:
        return (
            self._for_user(user_id)
            .filter(RecentSearch.created_at >= since)
            .order_by(RecentSearch.created_at.desc(), RecentSearch.id.desc())
            .limit(limit)
            .all()
        )

    def delete_matching(self, user_id: int, query: str, location: str) -> int:
        return (
            self._for_user(user_id)
            .filter(RecentSearch.query == query, RecentSearch.location == location)
            .delete(synchronize_session=False)
        )

    def prune(self, user_id: int, keep: int) -> int:
        """Delete everything but the ``keep`` newest entries; returns the number removed."""
        stale_ids = [
            search_id
            for (search_id,) in self._for_user(user_id)
            .with_entities(RecentSearch.id)
            .order_by(RecentSearch.created_at.desc(), RecentSearch.id.desc())
            .offset(keep)
            .all()
        ]
        if not stale_ids:
            return 0
        return (
            self.session.query(RecentSearch)
            .filter(RecentSearch.id.in_(stale_ids))
            .delete(synchronize_session=False)
        )
