"""Repository layer for persistence access."""

from .employer_repository import EmployerRepository
from .job_repository import JobRepository
from .recent_search_repository import RecentSearchRepository
from .saved_job_repository import SavedJobRepository
from .saved_search_repository import SavedSearchRepository
from .skill_repository import SkillRepository
from .user_repository import UserRepository

__all__ = [
    "EmployerRepository",
    "JobRepository",
    "RecentSearchRepository",
    "SavedJobRepository",
    "SavedSearchRepository",
    "SkillRepository",
    "UserRepository",
]
