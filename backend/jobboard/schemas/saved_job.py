"""Saved job schemas."""

from datetime import datetime

from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobSummary


class SavedJobResponse(CamelModel):
    id: int
    job_id: int
    created_at: datetime
    job: JobSummary


class SavedJobCheck(CamelModel):
    saved: bool
