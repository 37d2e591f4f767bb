"""Recent search history endpoints."""

from fastapi import APIRouter, Depends, status

from jobboard.core.auth import get_current_user
from jobboard.db import User
from jobboard.dependencies import get_recent_search_service
from jobboard.schemas.recent_search import RecentSearchCreate, RecentSearchResponse
from jobboard.services.recent_search_service import RecentSearchService

router = APIRouter(prefix="/recent-searches", tags=["recent-searches"])


@router.get("", response_model=list[RecentSearchResponse])
def list_recent_searches(
    current_user: User = Depends(get_current_user),
    service: RecentSearchService = Depends(get_recent_search_service),
) -> list[RecentSearchResponse]:
    """The caller's latest searches from the past 30 days, newest first."""
    return [RecentSearchResponse.model_validate(s) for s in service.list_recent(current_user)]


@router.post("", response_model=RecentSearchResponse, status_code=status.HTTP_201_CREATED)
def record_recent_search(
    payload: RecentSearchCreate,
    current_user: User = Depends(get_current_user),
    service: RecentSearchService = Depends(get_recent_search_service),
) -> RecentSearchResponse:
    return RecentSearchResponse.model_validate(service.record(payload, current_user))
