"""Job schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from jobboard.domain.filters import JobType, RemoteType
from jobboard.schemas.base import CamelModel


class EmployerSummary(CamelModel):
    id: int
    company_name: str
    logo: Optional[str] = None


class SkillSummary(CamelModel):
    id: int
    name: str


class JobSummary(CamelModel):
    """One entry of the listing response."""

    id: int
    title: str
    description: str
    location: str
    remote: str
    type: str
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: str = "EUR"
    created_at: datetime
    expires_at: Optional[datetime] = None
    featured: bool = False
    urgent: bool = False
    employer: EmployerSummary
    skills: list[SkillSummary] = Field(default_factory=list)
    application_count: int = 0

    @classmethod
    def from_job(cls, job, application_count: int = 0) -> "JobSummary":
        summary = cls.model_validate(job)
        summary.application_count = application_count
        return summary


class JobDetail(JobSummary):
    """Full job posting."""

    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    experience_level: Optional[str] = None
    education_level: Optional[str] = None
    application_email: Optional[str] = None
    application_url: Optional[str] = None
    languages: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    status: str
    published_at: Optional[datetime] = None

    @classmethod
    def from_job(cls, job, application_count: int = 0) -> "JobDetail":
        detail = cls.model_validate(job)
        detail.application_count = application_count
        return detail


class JobListResponse(CamelModel):
    """Listing response: ``{jobs, total, page, limit, totalPages}``."""

    jobs: list[JobSummary]
    total: int
    page: int
    limit: int
    total_pages: int


class RelatedJobsResponse(CamelModel):
    jobs: list[JobSummary]


class JobCreate(CamelModel):
    """Job posting payload."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=100)
    type: JobType
    remote: RemoteType = RemoteType.ONSITE
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    experience_level: Optional[str] = Field(None, max_length=10)
    education_level: Optional[str] = Field(None, max_length=30)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    salary_currency: str = "EUR"
    application_email: Optional[str] = Field(None, max_length=255)
    application_url: Optional[str] = Field(None, max_length=500)
    skills: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    status: Literal["DRAFT", "PUBLISHED"] = "DRAFT"
    featured: bool = False
    urgent: bool = False
    expires_at: Optional[datetime] = None

    @field_validator("title", "description", "location")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Must not be blank")
        return v

    @field_validator("salary_currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.strip().upper()
