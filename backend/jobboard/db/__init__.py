"""Database module initialization."""

from .models import (
    Application,
    Base,
    Employer,
    Job,
    JobSeekerProfile,
    JobTag,
    RecentSearch,
    SavedJob,
    SavedSearch,
    Skill,
    User,
    job_skills,
)
from .session import SessionLocal, engine, get_db
from .utils import seed_default_data

__all__ = [
    "Application",
    "Base",
    "Employer",
    "Job",
    "JobSeekerProfile",
    "JobTag",
    "RecentSearch",
    "SavedJob",
    "SavedSearch",
    "Skill",
    "User",
    "job_skills",
    "get_db",
    "engine",
    "SessionLocal",
    "seed_default_data",
]
