"""Job persistence helpers, including the faceted listing query."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence, Tuple

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session, contains_eager, selectinload

from jobboard.db import Application, Employer, Job, JobTag, Skill
from jobboard.domain.filters import SearchFilters, SortBy, SortOrder
from jobboard.repositories.base import (
    LIKE_ESCAPE,
    SQLAlchemyRepository,
    contains_pattern,
)

PUBLISHED = "PUBLISHED"

POSTED_WITHIN_DAYS = {
    "week": 7,
    "month": 30,
    "3months": 90,
}
DEFAULT_POSTED_WITHIN_DAYS = 7


def posted_within_cutoff(value: str, now: datetime) -> Optional[datetime]:
    """Earliest creation time admitted by a recency window; None when unconstrained."""
    if not value:
        return None
    if value == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    return now - timedelta(days=POSTED_WITHIN_DAYS.get(value, DEFAULT_POSTED_WITHIN_DAYS))


def _application_count():
    return (
        select(func.count(Application.id))
        .where(Application.job_id == Job.id)
        .correlate(Job)
        .scalar_subquery()
    )


class JobRepository(SQLAlchemyRepository[Job]):
    """Encapsulates job queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self.session.query(Job).filter(Job.id == job_id).first()

    def _published_query(self, now: datetime):
        return (
            self.session.query(Job)
            .join(Job.employer)
            .filter(Job.status == PUBLISHED)
            .filter(or_(Job.expires_at.is_(None), Job.expires_at > now))
        )

    @staticmethod
    def _with_loaders(query):
        return query.options(
            contains_eager(Job.employer),
            selectinload(Job.skills),
            selectinload(Job.tags),
        )

    def get_published(self, job_id: int, now: Optional[datetime] = None) -> Optional[Job]:
        now = now or datetime.utcnow()
        return self._with_loaders(self._published_query(now)).filter(Job.id == job_id).first()

    def search(
        self,
        filters: SearchFilters,
        *,
        skip: int = 0,
        limit: int = 12,
        now: Optional[datetime] = None,
        published_since: Optional[datetime] = None,
        exclude_job_ids: Iterable[int] = (),
    ) -> Tuple[int, Sequence[Job]]:
        """Return ``(total, page)`` of published jobs matching ``filters``."""
        now = now or datetime.utcnow()
        query = self._apply_filters(self._published_query(now), filters, now)
        if published_since is not None:
            query = query.filter(Job.published_at >= published_since)
        excluded = list(exclude_job_ids)
        if excluded:
            query = query.filter(Job.id.notin_(excluded))

        total = query.count()
        records = (
            self._with_loaders(query)
            .order_by(*self._ordering(filters))
            .offset(skip)
            .limit(limit)
            .all()
        )
        return total, records

    def _apply_filters(self, query, filters: SearchFilters, now: datetime):
        if filters.query:
            like = contains_pattern(filters.query)
            query = query.filter(
                or_(
                    Job.title.ilike(like, escape=LIKE_ESCAPE),
                    Job.description.ilike(like, escape=LIKE_ESCAPE),
                    Job.requirements.ilike(like, escape=LIKE_ESCAPE),
                    Job.responsibilities.ilike(like, escape=LIKE_ESCAPE),
                )
            )
        if filters.location:
            query = query.filter(
                Job.location.ilike(contains_pattern(filters.location), escape=LIKE_ESCAPE)
            )
        if filters.remote_type:
            query = query.filter(Job.remote.in_(filters.remote_type))
        if filters.job_type:
            query = query.filter(Job.type.in_(filters.job_type))
        if filters.experience:
            query = query.filter(Job.experience_level.in_(filters.experience))
        if filters.education:
            query = query.filter(Job.education_level.in_(filters.education))
        if filters.industry:
            query = query.filter(Employer.industry.in_(filters.industry))
        if filters.company_size:
            query = query.filter(Employer.size_band.in_(filters.company_size))
        if filters.skills:
            names = [name.lower() for name in filters.skills]
            query = query.filter(Job.skills.any(func.lower(Skill.name).in_(names)))
        if filters.languages:
            query = query.filter(
                Job.tags.any(and_(JobTag.kind == "language", JobTag.value.in_(filters.languages)))
            )
        if filters.benefits:
            query = query.filter(
                Job.tags.any(and_(JobTag.kind == "benefit", JobTag.value.in_(filters.benefits)))
            )
        if not filters.is_default("salary_range"):
            low, high = filters.salary_range
            query = query.filter(
                or_(
                    and_(Job.salary_min >= low, Job.salary_max <= high),
                    and_(Job.salary_min >= low, Job.salary_min <= high, Job.salary_max.is_(None)),
                    and_(Job.salary_min.is_(None), Job.salary_max >= low, Job.salary_max <= high),
                )
            )
        if filters.featured is not None:
            query = query.filter(Job.featured.is_(filters.featured))
        if filters.urgent is not None:
            query = query.filter(Job.urgent.is_(filters.urgent))
        cutoff = posted_within_cutoff(filters.posted_within, now)
        if cutoff is not None:
            query = query.filter(Job.created_at >= cutoff)
        return query

    @staticmethod
    def _ordering(filters: SearchFilters) -> list:
        ascending = filters.sort_order == SortOrder.ASC.value

        def direction(column):
            return column.asc() if ascending else column.desc()

        sort_by = filters.sort_by
        if sort_by == SortBy.DATE.value:
            columns = [direction(Job.created_at)]
        elif sort_by == SortBy.SALARY.value:
            columns = [
                direction(Job.salary_min).nulls_last(),
                direction(Job.salary_max).nulls_last(),
            ]
        elif sort_by == SortBy.COMPANY.value:
            columns = [direction(Employer.company_name)]
        elif sort_by == SortBy.APPLICATIONS.value:
            columns = [direction(_application_count())]
        elif sort_by == SortBy.LOCATION.value:
            columns = [direction(Job.location)]
        elif sort_by == SortBy.DEADLINE.value:
            columns = [direction(Job.expires_at).nulls_last()]
        else:
            # relevance, distance (no geodata) and unknown keys
            return [Job.featured.desc(), Job.urgent.desc(), Job.created_at.desc(), Job.id.desc()]
        return columns + [direction(Job.id)]

    def application_counts(self, job_ids: Sequence[int]) -> dict[int, int]:
        if not job_ids:
            return {}
        rows = (
            self.session.query(Application.job_id, func.count(Application.id))
            .filter(Application.job_id.in_(job_ids))
            .group_by(Application.job_id)
            .all()
        )
        return {job_id: count for job_id, count in rows}

    def applied_job_ids(self, user_id: int) -> set[int]:
        rows = self.session.query(Application.job_id).filter(Application.user_id == user_id).all()
        return {job_id for (job_id,) in rows}

    def list_most_relevant(self, limit: int, now: Optional[datetime] = None) -> Sequence[Job]:
        now = now or datetime.utcnow()
        return (
            self._with_loaders(self._published_query(now))
            .order_by(Job.featured.desc(), Job.urgent.desc(), Job.created_at.desc(), Job.id.desc())
            .limit(limit)
            .all()
        )

    def related(self, job: Job, limit: int, now: Optional[datetime] = None) -> Sequence[Job]:
        """Other published jobs sharing location, type, remote mode, industry or a skill."""
        now = now or datetime.utcnow()
        shared = [
            Job.location == job.location,
            Job.type == job.type,
            Job.remote == job.remote,
        ]
        if job.employer is not None and job.employer.industry:
            shared.append(Employer.industry == job.employer.industry)
        skill_ids = [skill.id for skill in job.skills]
        if skill_ids:
            shared.append(Job.skills.any(Skill.id.in_(skill_ids)))
        return (
            self._with_loaders(self._published_query(now))
            .filter(Job.id != job.id)
            .filter(or_(*shared))
            .order_by(Job.featured.desc(), Job.urgent.desc(), Job.created_at.desc(), Job.id.desc())
            .limit(limit)
            .all()
        )

    def suggest(self, text: str, limit: int, now: Optional[datetime] = None) -> Sequence[Job]:
        now = now or datetime.utcnow()
        like = contains_pattern(text)
        return (
            self._with_loaders(self._published_query(now))
            .filter(
                or_(
                    Job.title.ilike(like, escape=LIKE_ESCAPE),
                    Job.description.ilike(like, escape=LIKE_ESCAPE),
                )
            )
            .order_by(Job.featured.desc(), Job.urgent.desc(), Job.created_at.desc())
            .limit(limit)
            .all()
        )
