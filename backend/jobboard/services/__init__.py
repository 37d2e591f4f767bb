"""Service layer entry points."""

from .alert_service import AlertService
from .job_posting_service import JobPostingService
from .recent_search_service import RecentSearchService
from .recommendation_service import RecommendationService
from .saved_job_service import SavedJobService
from .saved_search_service import SavedSearchService
from .search_service import SearchService
from .suggestion_service import SuggestionService

__all__ = [
    "AlertService",
    "JobPostingService",
    "RecentSearchService",
    "RecommendationService",
    "SavedJobService",
    "SavedSearchService",
    "SearchService",
    "SuggestionService",
]
