"""
Activity Pydantic schemas.
Write bodies are validated and sanitized here before any storage access:
text fields are trimmed and truncated, points are range checked, and a blank
date falls back to today's UTC date.
"""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 100
HOST_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 200
MIN_POINTS = 1
MAX_POINTS = 1000


def today_utc() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


def _clean_optional_text(v: object, max_length: int) -> object:
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()[:max_length]
    return v


# ── Write (create and full replace) ───────────────────────────────────────────

class ActivityWrite(BaseModel):
    """Body for both POST /activities and PUT /activities/{id}; every field is replaced."""

    name: str
    points: int
    date: dt.date | None = Field(default=None, validate_default=True)
    host: str = ""
    description: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v: object) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Valid activity name is required")
        return v.strip()[:NAME_MAX_LENGTH]

    @field_validator("points", mode="before")
    @classmethod
    def check_points(cls, v: object) -> int:
        # bool is an int subclass; JSON true/false are not point values
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(
                f"Points must be a number between {MIN_POINTS} and {MAX_POINTS}"
            )
        if not MIN_POINTS <= v <= MAX_POINTS:
            raise ValueError(
                f"Points must be a number between {MIN_POINTS} and {MAX_POINTS}"
            )
        return v

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date", mode="after")
    @classmethod
    def default_to_today(cls, v: dt.date | None) -> dt.date:
        return v if v is not None else today_utc()

    @field_validator("host", mode="before")
    @classmethod
    def clean_host(cls, v: object) -> object:
        return _clean_optional_text(v, HOST_MAX_LENGTH)

    @field_validator("description", mode="before")
    @classmethod
    def clean_description(cls, v: object) -> object:
        return _clean_optional_text(v, DESCRIPTION_MAX_LENGTH)


# ── Read ──────────────────────────────────────────────────────────────────────

class ActivityRead(BaseModel):
    id: int
    user_id: int
    name: str
    points: int
    date: dt.date
    host: str
    description: str
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str


# ── Aggregates ────────────────────────────────────────────────────────────────

class ActivityTotal(BaseModel):
    total: int
    remaining: int


class ActivityStats(BaseModel):
    """Serialized with camelCase keys (totalActivities, averagePoints, ...)."""

    total_activities: int
    total_points: int
    average_points: float
    max_points: int
    min_points: int
    remaining: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
