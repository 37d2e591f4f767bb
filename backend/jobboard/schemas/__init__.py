"""Schemas module initialization."""

from .job import (
    EmployerSummary,
    JobCreate,
    JobDetail,
    JobListResponse,
    JobSummary,
    RelatedJobsResponse,
    SkillSummary,
)
from .recent_search import RecentSearchCreate, RecentSearchResponse
from .saved_job import SavedJobCheck, SavedJobResponse
from .saved_search import SavedSearchCreate, SavedSearchResponse, SavedSearchUpdate
from .search import (
    AlertRunSummary,
    Recommendation,
    RecommendationsResponse,
    Suggestion,
    SuggestionsResponse,
)

__all__ = [
    "AlertRunSummary",
    "EmployerSummary",
    "JobCreate",
    "JobDetail",
    "JobListResponse",
    "JobSummary",
    "RecentSearchCreate",
    "RecentSearchResponse",
    "Recommendation",
    "RecommendationsResponse",
    "RelatedJobsResponse",
    "SavedJobCheck",
    "SavedJobResponse",
    "SavedSearchCreate",
    "SavedSearchResponse",
    "SavedSearchUpdate",
    "SkillSummary",
    "Suggestion",
    "SuggestionsResponse",
]
