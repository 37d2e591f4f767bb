"""Shared FastAPI dependency factories."""

from fastapi import Depends
from sqlalchemy.orm import Session

from jobboard.db import get_db
from jobboard.services import (
    AlertService,
    JobPostingService,
    RecentSearchService,
    RecommendationService,
    SavedJobService,
    SavedSearchService,
    SearchService,
    SuggestionService,
)


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_search_service(session: Session = Depends(get_session)) -> SearchService:
    return SearchService(session)


def get_saved_search_service(session: Session = Depends(get_session)) -> SavedSearchService:
    return SavedSearchService(session)


def get_saved_job_service(session: Session = Depends(get_session)) -> SavedJobService:
    return SavedJobService(session)


def get_job_posting_service(session: Session = Depends(get_session)) -> JobPostingService:
    return JobPostingService(session)


def get_suggestion_service(session: Session = Depends(get_session)) -> SuggestionService:
    return SuggestionService(session)


def get_recommendation_service(
    session: Session = Depends(get_session),
) -> RecommendationService:
    return RecommendationService(session)


def get_alert_service(session: Session = Depends(get_session)) -> AlertService:
    return AlertService(session)


def get_recent_search_service(session: Session = Depends(get_session)) -> RecentSearchService:
    return RecentSearchService(session)
