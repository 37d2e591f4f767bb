"""Saved job endpoints."""

from fastapi import APIRouter, Depends, status

from jobboard.core.auth import get_current_user
from jobboard.db import User
from jobboard.dependencies import get_saved_job_service
from jobboard.schemas.saved_job import SavedJobCheck, SavedJobResponse
from jobboard.services.saved_job_service import SavedJobService

router = APIRouter(prefix="/saved-jobs", tags=["saved-jobs"])


@router.get("", response_model=list[SavedJobResponse])
def list_saved_jobs(
    current_user: User = Depends(get_current_user),
    service: SavedJobService = Depends(get_saved_job_service),
) -> list[SavedJobResponse]:
    return [SavedJobResponse.model_validate(s) for s in service.list_saved(current_user)]


@router.post("/{job_id}", response_model=SavedJobResponse, status_code=status.HTTP_201_CREATED)
def save_job(
    job_id: int,
    current_user: User = Depends(get_current_user),
    service: SavedJobService = Depends(get_saved_job_service),
) -> SavedJobResponse:
    return SavedJobResponse.model_validate(service.save_job(job_id, current_user))


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def unsave_job(
    job_id: int,
    current_user: User = Depends(get_current_user),
    service: SavedJobService = Depends(get_saved_job_service),
) -> None:
    service.unsave_job(job_id, current_user)


@router.get("/{job_id}/check", response_model=SavedJobCheck)
def check_saved_job(
    job_id: int,
    current_user: User = Depends(get_current_user),
    service: SavedJobService = Depends(get_saved_job_service),
) -> SavedJobCheck:
    return SavedJobCheck(saved=service.is_saved(job_id, current_user))
