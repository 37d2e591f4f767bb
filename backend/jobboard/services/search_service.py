"""Job listing and detail services."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.core.metrics import record_search
from jobboard.db import Job
from jobboard.domain.exceptions import NotFoundError
from jobboard.domain.query import ListingQuery
from jobboard.repositories import JobRepository
from jobboard.schemas.job import JobDetail, JobListResponse, JobSummary, RelatedJobsResponse

logger = logging.getLogger(__name__)

RELATED_JOBS_LIMIT = 6


class SearchService:
    """Runs the faceted listing query and shapes its response."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)

    def list_jobs(self, listing: ListingQuery, now: Optional[datetime] = None) -> JobListResponse:
        filters = listing.filters
        total, records = self.jobs.search(
            filters, skip=listing.offset, limit=listing.limit, now=now
        )
        record_search(filters.sort_by, total, filters.constrained_fields())
        logger.debug(
            "Listing query served",
            extra={
                "total": total,
                "page": listing.page,
                "sort_by": filters.sort_by,
                "facets": filters.constrained_fields(),
            },
        )
        return JobListResponse(
            jobs=self.summaries(records),
            total=total,
            page=listing.page,
            limit=listing.limit,
            total_pages=math.ceil(total / listing.limit) if total else 0,
        )

    def summaries(self, records: Sequence[Job]) -> list[JobSummary]:
        counts = self.jobs.application_counts([job.id for job in records])
        return [JobSummary.from_job(job, counts.get(job.id, 0)) for job in records]

    def get_job(self, job_id: int, now: Optional[datetime] = None) -> JobDetail:
        job = self.jobs.get_published(job_id, now)
        if job is None:
            raise NotFoundError("Job not found")
        counts = self.jobs.application_counts([job.id])
        return JobDetail.from_job(job, counts.get(job.id, 0))

    def related_jobs(
        self, job_id: int, limit: int = RELATED_JOBS_LIMIT, now: Optional[datetime] = None
    ) -> RelatedJobsResponse:
        job = self.jobs.get_published(job_id, now)
        if job is None:
            raise NotFoundError("Job not found")
        return RelatedJobsResponse(jobs=self.summaries(self.jobs.related(job, limit, now)))
