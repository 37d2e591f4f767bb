"""Profile-based job recommendations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from jobboard.core.config import settings
from jobboard.db import Job, User
from jobboard.domain.exceptions import NotFoundError
from jobboard.repositories import JobRepository, UserRepository
from jobboard.schemas.job import JobSummary
from jobboard.schemas.search import Recommendation, RecommendationsResponse

logger = logging.getLogger(__name__)

SKILL_POINTS = 10
SKILL_POINTS_MAX = 40
LOCATION_POINTS = 30
REMOTE_POINTS = 20
SENIORITY_POINTS = 20
SENIOR_YEARS = 3
FLAG_POINTS = 5
MAX_SCORE = 100


@dataclass(slots=True)
class MatchResult:
    score: int = 0
    matching_skills: list[str] = field(default_factory=list)
    reasons: list[str] = field(default_factory=list)


def _skills_overlap(candidate: str, required: Sequence[str]) -> bool:
    return any(candidate in skill or skill in candidate for skill in required)


def score_job(
    job: Job,
    *,
    skills: Sequence[str],
    location: Optional[str],
    experience_years: int,
) -> MatchResult:
    """Deterministic 0-100 match score of one job against a seeker profile."""
    result = MatchResult()
    job_skills = [skill.name.lower() for skill in job.skills]

    result.matching_skills = [
        name for name in skills if name.strip() and _skills_overlap(name.lower(), job_skills)
    ]
    if result.matching_skills:
        result.score += min(SKILL_POINTS_MAX, len(result.matching_skills) * SKILL_POINTS)
        result.reasons.append(f"Skills match: {', '.join(result.matching_skills)}")

    wanted = (location or "").strip().lower()
    offered = job.location.lower()
    if wanted and (wanted in offered or offered in wanted):
        result.score += LOCATION_POINTS
        result.reasons.append("Location match")
    elif job.remote == "REMOTE":
        result.score += REMOTE_POINTS
        result.reasons.append("Remote work opportunity")

    title = job.title.lower()
    if experience_years >= SENIOR_YEARS and "senior" in title:
        result.score += SENIORITY_POINTS
        result.reasons.append("Experience level matches senior position")
    elif experience_years < SENIOR_YEARS and "junior" in title:
        result.score += SENIORITY_POINTS
        result.reasons.append("Experience level matches entry position")

    if job.featured:
        result.score += FLAG_POINTS
    if job.urgent:
        result.score += FLAG_POINTS
    result.score = min(result.score, MAX_SCORE)
    return result


class RecommendationService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)
        self.users = UserRepository(session)

    def recommend(
        self, user: User, limit: int = 6, now: Optional[datetime] = None
    ) -> RecommendationsResponse:
        profile = self.users.get_job_seeker_profile(user.id)
        if profile is None:
            raise NotFoundError("Job seeker profile not found")

        applied = self.jobs.applied_job_ids(user.id)
        candidates = [
            job
            for job in self.jobs.list_most_relevant(settings.recommendation_pool_size, now)
            if job.id not in applied
        ]
        if not candidates:
            return RecommendationsResponse(message="No new jobs available for recommendation")

        skill_names = [skill.name for skill in profile.skills]
        scored = [
            (
                job,
                score_job(
                    job,
                    skills=skill_names,
                    location=profile.location,
                    experience_years=profile.experience_years,
                ),
            )
            for job in candidates
        ]
        # Stable sort keeps the relevance order among equal scores.
        scored.sort(key=lambda pair: pair[1].score, reverse=True)
        top = scored[:limit]

        counts = self.jobs.application_counts([job.id for job, _ in top])
        logger.debug(
            "Recommendations computed",
            extra={"user_id": user.id, "candidates": len(candidates), "returned": len(top)},
        )
        return RecommendationsResponse(
            recommendations=[
                Recommendation(
                    job=JobSummary.from_job(job, counts.get(job.id, 0)),
                    match_score=match.score,
                    matching_skills=match.matching_skills,
                    match_reasons=match.reasons,
                )
                for job, match in top
            ]
        )
