"""Saved search persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.db import SavedSearch
from jobboard.repositories.base import SQLAlchemyRepository


class SavedSearchRepository(SQLAlchemyRepository[SavedSearch]):
    """Encapsulates saved search queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def list_for_user(self, user_id: int) -> Sequence[SavedSearch]:
        return (
            self.session.query(SavedSearch)
            .filter(SavedSearch.user_id == user_id)
            .order_by(SavedSearch.created_at.desc(), SavedSearch.id.desc())
            .all()
        )

    def get_for_user(self, search_id: int, user_id: int) -> Optional[SavedSearch]:
        return (
            self.session.query(SavedSearch)
            .filter(SavedSearch.id == search_id, SavedSearch.user_id == user_id)
            .first()
        )

    def list_alerting(self) -> Sequence[SavedSearch]:
        return (
            self.session.query(SavedSearch)
            .filter(SavedSearch.alert_enabled.is_(True))
            .order_by(SavedSearch.id.asc())
            .all()
        )
