"""Saved search schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from jobboard.schemas.base import CamelModel

ALERT_FREQUENCIES = ("INSTANT", "DAILY", "WEEKLY")
DEFAULT_ALERT_FREQUENCY = "DAILY"
NAME_MAX_LENGTH = 120


def normalize_frequency(value: Optional[str]) -> str:
    """Known frequencies pass through (case-insensitive); anything else is DAILY."""
    if value and value.strip().upper() in ALERT_FREQUENCIES:
        return value.strip().upper()
    return DEFAULT_ALERT_FREQUENCY


def normalize_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name must not be blank")
    return value[:NAME_MAX_LENGTH]


class SavedSearchCreate(CamelModel):
    """``filters`` uses the listing query-string names (``remoteType``, ``salaryRange``...)."""

    name: str = Field(..., min_length=1)
    filters: dict = Field(default_factory=dict)
    alert_enabled: bool = False
    alert_frequency: str = DEFAULT_ALERT_FREQUENCY

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return normalize_name(v)

    @field_validator("alert_frequency")
    @classmethod
    def validate_frequency(cls, v: str) -> str:
        return normalize_frequency(v)


class SavedSearchUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    filters: Optional[dict] = None
    alert_enabled: Optional[bool] = None
    alert_frequency: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return normalize_name(v)
        return v

    @field_validator("alert_frequency")
    @classmethod
    def validate_frequency(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return normalize_frequency(v)
        return v


class SavedSearchResponse(CamelModel):
    id: int
    name: str
    query: Optional[str] = None
    location: Optional[str] = None
    filters: dict
    alert_enabled: bool
    alert_frequency: str
    last_alerted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
