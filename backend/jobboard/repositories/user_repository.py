"""User persistence helpers."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from jobboard.db import JobSeekerProfile, User
from jobboard.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    """Encapsulates user-related queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.query(User).filter(User.id == user_id).first()

    def get_job_seeker_profile(self, user_id: int) -> Optional[JobSeekerProfile]:
        return (
            self.session.query(JobSeekerProfile)
            .options(selectinload(JobSeekerProfile.skills))
            .filter(JobSeekerProfile.user_id == user_id)
            .first()
        )
