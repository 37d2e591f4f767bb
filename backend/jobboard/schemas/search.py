"""Suggestion and recommendation schemas."""

from typing import Any, Optional

from pydantic import Field

from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobSummary


class Suggestion(CamelModel):
    id: str
    text: str
    type: str  # job, skill, company, location
    subtitle: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class SuggestionGroups(CamelModel):
    jobs: list[Suggestion] = Field(default_factory=list)
    skills: list[Suggestion] = Field(default_factory=list)
    companies: list[Suggestion] = Field(default_factory=list)
    locations: list[Suggestion] = Field(default_factory=list)


class SuggestionCounts(CamelModel):
    jobs: int = 0
    skills: int = 0
    companies: int = 0
    locations: int = 0


class SuggestionsResponse(CamelModel):
    suggestions: SuggestionGroups = Field(default_factory=SuggestionGroups)
    total: SuggestionCounts = Field(default_factory=SuggestionCounts)
    message: Optional[str] = None


class Recommendation(CamelModel):
    job: JobSummary
    match_score: int
    matching_skills: list[str] = Field(default_factory=list)
    match_reasons: list[str] = Field(default_factory=list)


class RecommendationsResponse(CamelModel):
    recommendations: list[Recommendation] = Field(default_factory=list)
    message: Optional[str] = None


class AlertRunSummary(CamelModel):
    processed: int = 0
    alerted: int = 0
    skipped: int = 0
    jobs_matched: int = 0
