"""Employer-side job posting services."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from jobboard.db import Job, JobTag, User
from jobboard.domain.exceptions import ForbiddenError, ValidationError
from jobboard.repositories import EmployerRepository, SkillRepository
from jobboard.schemas.job import JobCreate

logger = logging.getLogger(__name__)

SUPPORTED_CURRENCIES = ("EUR",)


class JobPostingService:
    """Creates job postings for an employer account."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.employers = EmployerRepository(session)
        self.skills = SkillRepository(session)

    def create_job(self, payload: JobCreate, user: User) -> Job:
        employer = self.employers.get_for_user(user.id)
        if employer is None:
            raise ForbiddenError("Employer profile required to post jobs")
        self._validate(payload)

        now = datetime.utcnow()
        job = Job(
            employer_id=employer.id,
            title=payload.title,
            description=payload.description,
            requirements=payload.requirements,
            responsibilities=payload.responsibilities,
            location=payload.location,
            remote=payload.remote.value,
            type=payload.type.value,
            experience_level=payload.experience_level,
            education_level=payload.education_level,
            salary_min=payload.salary_min,
            salary_max=payload.salary_max,
            salary_currency=payload.salary_currency,
            application_email=payload.application_email,
            application_url=payload.application_url,
            status=payload.status,
            featured=payload.featured,
            urgent=payload.urgent,
            expires_at=payload.expires_at,
            published_at=now if payload.status == "PUBLISHED" else None,
        )
        self.session.add(job)
        seen: set[str] = set()
        for name in (n.strip() for n in payload.skills):
            if name and name.lower() not in seen:
                seen.add(name.lower())
                job.skills.append(self.skills.get_or_create(name))
        for kind, values in (("language", payload.languages), ("benefit", payload.benefits)):
            for value in dict.fromkeys(v.strip() for v in values if v.strip()):
                job.tags.append(JobTag(kind=kind, value=value))

        self.session.commit()
        self.session.refresh(job)
        logger.info(
            "Job posting created",
            extra={"job_id": job.id, "employer_id": employer.id, "status": job.status},
        )
        return job

    @staticmethod
    def _validate(payload: JobCreate) -> None:
        if payload.salary_min is None and payload.salary_max is None:
            raise ValidationError("At least one of salary minimum or maximum is required")
        if payload.salary_currency not in SUPPORTED_CURRENCIES:
            raise ValidationError("Only EUR salaries are supported")
        if (
            payload.salary_min is not None
            and payload.salary_max is not None
            and payload.salary_min > payload.salary_max
        ):
            raise ValidationError("Salary minimum cannot exceed salary maximum")
        if not (payload.application_email or payload.application_url):
            raise ValidationError("Provide an application email or URL")
