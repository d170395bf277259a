from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _drop_nulls(data: Any, keys: tuple[str, ...]) -> Any:
    """Let null backend columns fall back to the field defaults."""
    if not isinstance(data, dict):
        return data
    return {k: v for k, v in data.items() if not (k in keys and v is None)}


class Jobsite(BaseModel):
    id: str
    name: str
    city: str = ""
    state: str = ""
    slug: str

    # Location
    lat: Optional[float] = None
    lng: Optional[float] = None
    description: str = ""

    is_active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="before")
    @classmethod
    def _null_text_to_default(cls, data: Any) -> Any:
        return _drop_nulls(
            data, ("city", "state", "description", "is_active", "created_at", "updated_at")
        )

    @property
    def display_name(self) -> str:
        if self.city and self.state:
            return f"{self.name} ({self.city}, {self.state})"
        return self.name


class JobsiteMetrics(BaseModel):
    """Job-site-level aggregate over all of its hubs."""

    jobsite_id: str
    slug: str = ""
    jobsite_name: str = ""
    city: str = ""
    state: str = ""
    listings_14d: int = Field(default=0, ge=0)
    avg_response_hours: Optional[float] = Field(default=None, ge=0)
    total_active_listings: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _null_text_to_default(cls, data: Any) -> Any:
        # Aggregate views return null counts for job sites with no listings
        return _drop_nulls(
            data,
            ("slug", "jobsite_name", "city", "state", "listings_14d", "total_active_listings"),
        )


class ScarcitySignal(BaseModel):
    listings_14d: int = 0
    avg_response_hours: Optional[float] = None
    is_scarce: bool = True
