"""Faceted search filter state.

``SearchFilters`` holds every constraint a user can put on the job listing.
Attribute names are snake_case; each attribute also has a camelCase wire name
used on the query string (``remote_type`` <-> ``remoteType``). Either form is
accepted wherever a key is expected.
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields
from enum import Enum
from typing import Any, Optional

from jobboard.domain.exceptions import ValidationError


class RemoteType(str, Enum):
    ONSITE = "ONSITE"
    HYBRID = "HYBRID"
    REMOTE = "REMOTE"


class JobType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERNSHIP = "INTERNSHIP"
    FREELANCE = "FREELANCE"


class PostedWithin(str, Enum):
    ANY = ""
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    THREE_MONTHS = "3months"


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    DATE = "date"
    SALARY = "salary"
    COMPANY = "company"
    APPLICATIONS = "applications"
    LOCATION = "location"
    DEADLINE = "deadline"
    DISTANCE = "distance"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


SALARY_MIN = 0
SALARY_MAX = 200000
DEFAULT_SALARY_RANGE: tuple[int, int] = (SALARY_MIN, SALARY_MAX)

# attribute name -> wire name, in query-string order
WIRE_NAMES: dict[str, str] = {
    "query": "query",
    "location": "location",
    "remote_type": "remoteType",
    "job_type": "jobType",
    "salary_range": "salaryRange",
    "experience": "experience",
    "industry": "industry",
    "skills": "skills",
    "education": "education",
    "languages": "languages",
    "benefits": "benefits",
    "company_size": "companySize",
    "featured": "featured",
    "urgent": "urgent",
    "posted_within": "postedWithin",
    "sort_by": "sortBy",
    "sort_order": "sortOrder",
}
ATTRIBUTE_NAMES: dict[str, str] = {wire: attr for attr, wire in WIRE_NAMES.items()}

LIST_FIELDS = frozenset(
    {
        "remote_type",
        "job_type",
        "experience",
        "industry",
        "skills",
        "education",
        "languages",
        "benefits",
        "company_size",
    }
)
FLAG_FIELDS = frozenset({"featured", "urgent"})

# Facets counted by the "active filters" badge.
_BADGE_LIST_FIELDS = ("remote_type", "job_type", "experience", "industry", "skills")


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(slots=True)
class SearchFilters:
    """Filters accepted by the job listing endpoint.

    ``featured`` and ``urgent`` are tri-state: ``None`` leaves the facet
    unconstrained, ``True``/``False`` require that value.
    """

    query: str = ""
    location: str = ""
    remote_type: list[str] = field(default_factory=list)
    job_type: list[str] = field(default_factory=list)
    salary_range: tuple[int, int] = DEFAULT_SALARY_RANGE
    experience: list[str] = field(default_factory=list)
    industry: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    benefits: list[str] = field(default_factory=list)
    company_size: list[str] = field(default_factory=list)
    featured: Optional[bool] = None
    urgent: Optional[bool] = None
    posted_within: str = ""
    sort_by: str = SortBy.RELEVANCE.value
    sort_order: str = SortOrder.DESC.value

    @staticmethod
    def resolve_key(key: str) -> str:
        """Map an attribute or wire name to the attribute name."""
        if key in WIRE_NAMES:
            return key
        if key in ATTRIBUTE_NAMES:
            return ATTRIBUTE_NAMES[key]
        raise ValidationError(f"Unknown search filter: {key}")

    @classmethod
    def default_for(cls, key: str) -> Any:
        attr = cls.resolve_key(key)
        for f in fields(cls):
            if f.name == attr:
                if f.default_factory is not MISSING:
                    return f.default_factory()
                return f.default
        raise ValidationError(f"Unknown search filter: {key}")  # pragma: no cover

    def update_filter(self, key: str, value: Any) -> None:
        """Replace one field. Values are taken as given, apart from copying sequences."""
        attr = self.resolve_key(key)
        value = _plain(value)
        if attr in LIST_FIELDS:
            value = [_plain(item) for item in (value or [])]
        elif attr == "salary_range":
            value = tuple(value)
        setattr(self, attr, value)

    def toggle_array_filter(self, key: str, value: Any) -> None:
        """Add ``value`` to a list facet if absent, otherwise remove it."""
        attr = self.resolve_key(key)
        if attr not in LIST_FIELDS:
            raise ValidationError(f"Filter {WIRE_NAMES[attr]} is not a multi-value facet")
        value = _plain(value)
        current: list[str] = getattr(self, attr)
        if value in current:
            setattr(self, attr, [item for item in current if item != value])
        else:
            setattr(self, attr, [*current, value])

    def clear_filters(self) -> None:
        """Reset every field to its default."""
        for f in fields(self):
            setattr(self, f.name, self.default_for(f.name))

    def is_default(self, key: str) -> bool:
        attr = self.resolve_key(key)
        value = getattr(self, attr)
        default = self.default_for(attr)
        if attr == "salary_range":
            return tuple(value) == default
        return value == default

    def constrained_fields(self) -> list[str]:
        """Wire names of the fields that differ from their defaults."""
        return [wire for attr, wire in WIRE_NAMES.items() if not self.is_default(attr)]

    def active_filters_count(self) -> int:
        count = sum(len(getattr(self, attr)) for attr in _BADGE_LIST_FIELDS)
        count += sum(1 for attr in FLAG_FIELDS if getattr(self, attr) is not None)
        if self.posted_within:
            count += 1
        return count

    def copy(self) -> "SearchFilters":
        clone = SearchFilters()
        for f in fields(self):
            value = getattr(self, f.name)
            setattr(clone, f.name, list(value) if isinstance(value, list) else value)
        return clone
