"""Job posting, detail and recommendation endpoints."""

from fastapi import APIRouter, Depends, Query, status

from jobboard.core.auth import require_employer, require_job_seeker
from jobboard.db import User
from jobboard.dependencies import (
    get_job_posting_service,
    get_recommendation_service,
    get_search_service,
)
from jobboard.schemas.job import JobCreate, JobDetail, RelatedJobsResponse
from jobboard.schemas.search import RecommendationsResponse
from jobboard.services.job_posting_service import JobPostingService
from jobboard.services.recommendation_service import RecommendationService
from jobboard.services.search_service import SearchService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobDetail, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    current_user: User = Depends(require_employer),
    service: JobPostingService = Depends(get_job_posting_service),
) -> JobDetail:
    """Create a job posting for the caller's employer profile."""
    job = service.create_job(payload, current_user)
    return JobDetail.from_job(job)


@router.get("/recommendations", response_model=RecommendationsResponse)
def recommendations(
    limit: int = Query(6, ge=1, le=20),
    current_user: User = Depends(require_job_seeker),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationsResponse:
    """Published jobs ranked against the caller's job-seeker profile."""
    return service.recommend(current_user, limit=limit)


@router.get("/{job_id}", response_model=JobDetail)
def get_job(
    job_id: int,
    service: SearchService = Depends(get_search_service),
) -> JobDetail:
    return service.get_job(job_id)


@router.get("/{job_id}/related", response_model=RelatedJobsResponse)
def related_jobs(
    job_id: int,
    limit: int = Query(6, ge=1, le=20),
    service: SearchService = Depends(get_search_service),
) -> RelatedJobsResponse:
    """Published jobs that share a location, type, remote mode, industry or skill."""
    return service.related_jobs(job_id, limit=limit)
