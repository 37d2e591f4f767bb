"""Employer persistence helpers."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.db import Employer, Job
from jobboard.repositories.base import (
    LIKE_ESCAPE,
    SQLAlchemyRepository,
    contains_pattern,
)


class EmployerRepository(SQLAlchemyRepository[Employer]):
    """Encapsulates employer queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_for_user(self, user_id: int) -> Optional[Employer]:
        return self.session.query(Employer).filter(Employer.user_id == user_id).first()

    def suggest(self, text: str, limit: int) -> Sequence[tuple[Employer, int]]:
        """Employers whose name contains ``text``, with their published job counts."""
        published = func.count(Job.id)
        return (
            self.session.query(Employer, published)
            .outerjoin(Job, (Job.employer_id == Employer.id) & (Job.status == "PUBLISHED"))
            .filter(
                Employer.company_name.ilike(contains_pattern(text), escape=LIKE_ESCAPE)
            )
            .group_by(Employer.id)
            .order_by(Employer.company_name.asc())
            .limit(limit)
            .all()
        )
