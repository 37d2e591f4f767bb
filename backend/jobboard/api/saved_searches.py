"""Saved search endpoints."""

from fastapi import APIRouter, Depends, Query, status

from jobboard.core.auth import get_current_user
from jobboard.core.config import settings
from jobboard.db import User
from jobboard.dependencies import get_saved_search_service
from jobboard.schemas.job import JobListResponse
from jobboard.schemas.saved_search import (
    SavedSearchCreate,
    SavedSearchResponse,
    SavedSearchUpdate,
)
from jobboard.services.saved_search_service import SavedSearchService

router = APIRouter(prefix="/saved-searches", tags=["saved-searches"])


@router.get("", response_model=list[SavedSearchResponse])
def list_saved_searches(
    current_user: User = Depends(get_current_user),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> list[SavedSearchResponse]:
    return [SavedSearchResponse.model_validate(s) for s in service.list_searches(current_user)]


@router.post("", response_model=SavedSearchResponse, status_code=status.HTTP_201_CREATED)
def create_saved_search(
    payload: SavedSearchCreate,
    current_user: User = Depends(get_current_user),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> SavedSearchResponse:
    saved = service.create_search(payload, current_user)
    return SavedSearchResponse.model_validate(saved)


@router.patch("/{search_id}", response_model=SavedSearchResponse)
def update_saved_search(
    search_id: int,
    payload: SavedSearchUpdate,
    current_user: User = Depends(get_current_user),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> SavedSearchResponse:
    saved = service.update_search(search_id, payload, current_user)
    return SavedSearchResponse.model_validate(saved)


@router.delete("/{search_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_saved_search(
    search_id: int,
    current_user: User = Depends(get_current_user),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> None:
    service.delete_search(search_id, current_user)


@router.get("/{search_id}/results", response_model=JobListResponse)
def saved_search_results(
    search_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user: User = Depends(get_current_user),
    service: SavedSearchService = Depends(get_saved_search_service),
) -> JobListResponse:
    """Run a saved search's stored filters through the listing query."""
    return service.run_search(search_id, current_user, page=page, limit=limit)
