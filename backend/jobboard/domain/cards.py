"""Display cards for listing results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

REMOTE_LABELS = {
    "ONSITE": "On-site",
    "HYBRID": "Hybrid",
    "REMOTE": "Remote",
}

MAX_CARD_SKILLS = 6


def format_salary(
    salary_min: Optional[int], salary_max: Optional[int], currency: str = "EUR"
) -> str:
    if not salary_min and not salary_max:
        return "Salary not specified"
    if salary_min and salary_max:
        return f"{currency} {salary_min:,} - {salary_max:,}"
    if salary_min:
        return f"{currency} {salary_min:,}+"
    return f"Up to {currency} {salary_max:,}"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return _as_utc(datetime.fromisoformat(text))


def format_posted(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative posting age: Today, Yesterday, N days ago, N weeks ago, else the date."""
    created_at = _as_utc(created_at)
    now = _as_utc(now) if now else datetime.now(timezone.utc)
    days = abs((now - created_at).days)
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    return created_at.date().isoformat()


@dataclass(slots=True)
class JobCard:
    job_id: Any
    title: str
    company: str
    location: str
    remote_label: str
    type_label: str
    salary_text: str
    posted_text: str
    description: str = ""
    logo: Optional[str] = None
    skills: list[str] = field(default_factory=list)
    more_skills: int = 0
    application_count: Optional[int] = None
    badges: list[str] = field(default_factory=list)
    saved: bool = False
    match_score: Optional[int] = None
    matching_skills: list[str] = field(default_factory=list)

    @classmethod
    def from_summary(
        cls,
        summary: Mapping[str, Any],
        *,
        saved: bool = False,
        now: Optional[datetime] = None,
    ) -> "JobCard":
        """Build a card from one ``jobs[]`` entry of the listing response."""
        employer = summary.get("employer") or {}
        skill_names = [skill.get("name", "") for skill in summary.get("skills") or []]
        created_at = parse_timestamp(summary.get("createdAt"))
        badges = [name for name in ("featured", "urgent") if summary.get(name)]
        return cls(
            job_id=summary.get("id"),
            title=summary.get("title", ""),
            company=employer.get("companyName") or "",
            location=summary.get("location", ""),
            remote_label=REMOTE_LABELS.get(summary.get("remote", ""), "On-site"),
            type_label=(summary.get("type") or "").replace("_", " "),
            salary_text=format_salary(
                summary.get("salaryMin"),
                summary.get("salaryMax"),
                summary.get("salaryCurrency") or "EUR",
            ),
            posted_text=format_posted(created_at, now) if created_at else "",
            description=summary.get("description", ""),
            logo=employer.get("logo"),
            skills=skill_names[:MAX_CARD_SKILLS],
            more_skills=max(len(skill_names) - MAX_CARD_SKILLS, 0),
            application_count=summary.get("applicationCount"),
            badges=badges,
            saved=saved,
            match_score=summary.get("matchScore"),
            matching_skills=list(summary.get("matchingSkills") or [])[:4],
        )
