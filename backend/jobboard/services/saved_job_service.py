"""Saved job services."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.metrics import record_saved_job_event
from jobboard.db import SavedJob, User
from jobboard.domain.exceptions import AlreadyExistsError, NotFoundError
from jobboard.repositories import JobRepository, SavedJobRepository

logger = logging.getLogger(__name__)


class SavedJobService:
    """Bookmarks on published jobs."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.saved = SavedJobRepository(session)
        self.jobs = JobRepository(session)

    def list_saved(self, user: User) -> Sequence[SavedJob]:
        return self.saved.list_for_user(user.id)

    def is_saved(self, job_id: int, user: User) -> bool:
        return self.saved.get(user.id, job_id) is not None

    def save_job(self, job_id: int, user: User) -> SavedJob:
        if self.jobs.get_published(job_id) is None:
            raise NotFoundError("Job not found")
        if self.saved.get(user.id, job_id) is not None:
            raise AlreadyExistsError("Job already saved")

        saved = SavedJob(user_id=user.id, job_id=job_id)
        self.saved.add(saved)
        try:
            self.saved.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise AlreadyExistsError("Job already saved") from exc
        self.saved.refresh(saved)
        record_saved_job_event("saved")
        logger.info("Job saved", extra={"job_id": job_id, "user_id": user.id})
        return saved

    def unsave_job(self, job_id: int, user: User) -> None:
        saved = self.saved.get(user.id, job_id)
        if saved is None:
            raise NotFoundError("Saved job not found")
        self.saved.remove(saved)
        self.saved.commit()
        record_saved_job_event("removed")
