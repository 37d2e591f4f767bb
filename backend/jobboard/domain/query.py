"""Translate ``SearchFilters`` to and from the flat listing query string.

Fields equal to their defaults are left out, list facets are comma-joined,
and ``page``/``limit`` are always present because pagination lives outside
the filter state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from jobboard.domain.filters import (
    DEFAULT_SALARY_RANGE,
    FLAG_FIELDS,
    LIST_FIELDS,
    WIRE_NAMES,
    SearchFilters,
)

DELIMITER = ","


@dataclass(slots=True)
class ListingQuery:
    """A decoded listing request."""

    filters: SearchFilters
    page: int = 1
    limit: int = 12

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def to_filter_params(filters: SearchFilters) -> dict[str, str]:
    """Flat wire representation of the filters alone (no pagination)."""
    params: dict[str, str] = {}
    for attr, wire in WIRE_NAMES.items():
        value = getattr(filters, attr)
        if attr in LIST_FIELDS:
            if value:
                params[wire] = DELIMITER.join(str(item) for item in value)
        elif attr == "salary_range":
            if tuple(value) != DEFAULT_SALARY_RANGE:
                params[wire] = f"{value[0]}{DELIMITER}{value[1]}"
        elif attr in FLAG_FIELDS:
            if value is not None:
                params[wire] = "true" if value else "false"
        elif value not in ("", None) and not filters.is_default(attr):
            params[wire] = str(value)
    return params


def to_query_params(filters: SearchFilters, *, page: int, limit: int) -> dict[str, str]:
    params = to_filter_params(filters)
    params["page"] = str(page)
    params["limit"] = str(limit)
    return params


def to_query_string(filters: SearchFilters, *, page: int, limit: int) -> str:
    """URL-encoded query string, e.g. ``query=developer&salaryRange=30000%2C60000&page=1&limit=12``."""
    return urlencode(to_query_params(filters, page=page, limit=limit))


def _raw(params: Mapping[str, Any], key: str) -> Optional[str]:
    # Repeated keys (remoteType=A&remoteType=B) are folded into one CSV value.
    getlist = getattr(params, "getlist", None)
    if getlist is not None:
        values = [value for value in getlist(key) if value is not None]
        return DELIMITER.join(values) if values else None
    value = params.get(key)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return DELIMITER.join(str(item) for item in value)
    return str(value)


def _split(value: str) -> list[str]:
    items: list[str] = []
    for item in value.split(DELIMITER):
        item = item.strip()
        if item and item not in items:
            items.append(item)
    return items


def _parse_flag(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _parse_salary_range(value: str) -> Optional[tuple[int, int]]:
    parts = [part.strip() for part in value.split(DELIMITER)]
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _parse_int(value: Optional[str], fallback: int) -> int:
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def parse_filter_params(params: Mapping[str, Any]) -> SearchFilters:
    """Decode wire params into ``SearchFilters``; unknown keys are ignored."""
    filters = SearchFilters()
    for attr, wire in WIRE_NAMES.items():
        raw = _raw(params, wire)
        if raw is None:
            continue
        if attr in LIST_FIELDS:
            filters.update_filter(attr, _split(raw))
        elif attr == "salary_range":
            salary_range = _parse_salary_range(raw)
            if salary_range is not None:
                filters.update_filter(attr, salary_range)
        elif attr in FLAG_FIELDS:
            filters.update_filter(attr, _parse_flag(raw))
        else:
            filters.update_filter(attr, raw.strip())
    return filters


def parse_query_params(
    params: Mapping[str, Any],
    *,
    default_limit: int = 12,
    max_limit: int = 100,
) -> ListingQuery:
    """Decode a full listing request (filters plus ``page`` and ``limit``)."""
    page = _parse_int(_raw(params, "page"), 1)
    limit = _parse_int(_raw(params, "limit"), default_limit)
    if page < 1:
        page = 1
    if limit < 1:
        limit = default_limit
    return ListingQuery(
        filters=parse_filter_params(params),
        page=page,
        limit=min(limit, max_limit),
    )
