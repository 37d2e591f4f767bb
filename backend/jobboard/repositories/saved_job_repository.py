"""Saved job persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session, joinedload

from jobboard.db import Job, SavedJob
from jobboard.repositories.base import SQLAlchemyRepository


class SavedJobRepository(SQLAlchemyRepository[SavedJob]):
    """Encapsulates saved job queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get(self, user_id: int, job_id: int) -> Optional[SavedJob]:
        return (
            self.session.query(SavedJob)
            .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
            .first()
        )

    def list_for_user(self, user_id: int) -> Sequence[SavedJob]:
        return (
            self.session.query(SavedJob)
            .options(joinedload(SavedJob.job).joinedload(Job.employer))
            .filter(SavedJob.user_id == user_id)
            .order_by(SavedJob.created_at.desc(), SavedJob.id.desc())
            .all()
        )

    def saved_job_ids(self, user_id: int, job_ids: Sequence[int]) -> set[int]:
        if not job_ids:
            return set()
        rows = (
            self.session.query(SavedJob.job_id)
            .filter(SavedJob.user_id == user_id, SavedJob.job_id.in_(job_ids))
            .all()
        )
        return {job_id for (job_id,) in rows}
