"""Search-as-you-type suggestions."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from jobboard.domain.locations import district_for, match_locations
from jobboard.repositories import EmployerRepository, JobRepository, SkillRepository
from jobboard.schemas.search import (
    Suggestion,
    SuggestionCounts,
    SuggestionGroups,
    SuggestionsResponse,
)

MIN_QUERY_LENGTH = 2
SUGGESTION_TYPES = ("all", "jobs", "skills", "companies", "locations")


class SuggestionService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)
        self.skills = SkillRepository(session)
        self.employers = EmployerRepository(session)

    def suggest(self, text: str, kind: str = "all", limit: int = 10) -> SuggestionsResponse:
        text = (text or "").strip()
        if len(text) < MIN_QUERY_LENGTH:
            return SuggestionsResponse(
                message=f"Query too short. Minimum {MIN_QUERY_LENGTH} characters required."
            )
        if kind not in SUGGESTION_TYPES:
            kind = "all"

        groups = SuggestionGroups(
            jobs=self._jobs(text, limit) if kind in ("all", "jobs") else [],
            skills=self._skills(text, limit) if kind in ("all", "skills") else [],
            companies=self._companies(text, limit) if kind in ("all", "companies") else [],
            locations=self._locations(text, limit) if kind in ("all", "locations") else [],
        )
        return SuggestionsResponse(
            suggestions=groups,
            total=SuggestionCounts(
                jobs=len(groups.jobs),
                skills=len(groups.skills),
                companies=len(groups.companies),
                locations=len(groups.locations),
            ),
        )

    def _jobs(self, text: str, limit: int) -> list[Suggestion]:
        return [
            Suggestion(
                id=f"job-{job.id}",
                text=job.title,
                type="job",
                subtitle=f"{job.employer.company_name} • {job.location}",
                metadata={"jobId": job.id, "location": job.location, "jobType": job.type},
            )
            for job in self.jobs.suggest(text, limit)
        ]

    def _skills(self, text: str, limit: int) -> list[Suggestion]:
        suggestions = []
        for skill, usage in self.skills.suggest(text, limit):
            used = f"Used in {usage} jobs"
            suggestions.append(
                Suggestion(
                    id=f"skill-{skill.id}",
                    text=skill.name,
                    type="skill",
                    subtitle=f"{skill.category} • {used}" if skill.category else used,
                    metadata={"skillId": skill.id, "category": skill.category, "usageCount": usage},
                )
            )
        return suggestions

    def _companies(self, text: str, limit: int) -> list[Suggestion]:
        suggestions = []
        for employer, job_count in self.employers.suggest(text, limit):
            parts: list[Optional[str]] = [employer.industry, employer.city, f"{job_count} jobs"]
            suggestions.append(
                Suggestion(
                    id=f"company-{employer.id}",
                    text=employer.company_name,
                    type="company",
                    subtitle=" • ".join(part for part in parts if part),
                    metadata={"employerId": employer.id, "jobCount": job_count},
                )
            )
        return suggestions

    def _locations(self, text: str, limit: int) -> list[Suggestion]:
        return [
            Suggestion(
                id=f"location-{city}",
                text=city,
                type="location",
                subtitle=(district_for(city) or "Cyprus").title(),
                metadata={"district": district_for(city)},
            )
            for city in match_locations(text, limit)
        ]
