"""Recent search schemas."""

from datetime import datetime

from pydantic import Field

from jobboard.schemas.base import CamelModel


class RecentSearchCreate(CamelModel):
    """``filters`` uses the listing query-string names; ``query``/``location`` override them."""

    query: str = Field("", max_length=255)
    location: str = Field("", max_length=100)
    filters: dict = Field(default_factory=dict)


class RecentSearchResponse(CamelModel):
    id: int
    query: str
    location: str
    filters: dict
    created_at: datetime
