"""Job listing endpoint.

Served at the application root as ``GET /jobs-listing``; the query string is
the flat filter encoding produced by ``jobboard.domain.query``.
"""

from fastapi import APIRouter, Depends, Request

from jobboard.core.config import settings
from jobboard.core.ratelimit import limiter
from jobboard.dependencies import get_search_service
from jobboard.domain.query import parse_query_params
from jobboard.schemas.job import JobListResponse
from jobboard.services.search_service import SearchService

router = APIRouter(tags=["listing"])


@router.get("/jobs-listing", response_model=JobListResponse)
@limiter.limit(settings.search_rate_limit)
def list_jobs(
    request: Request,
    service: SearchService = Depends(get_search_service),
) -> JobListResponse:
    """List published jobs matching the filters in the query string.

    Repeated keys (``remoteType=REMOTE&remoteType=HYBRID``) and comma-joined
    values are equivalent. Unknown keys are ignored.
    """
    listing = parse_query_params(
        request.query_params,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
    return service.list_jobs(listing)
