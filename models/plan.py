"""Plan My Move request/response payloads."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from models.enums import RoomType, Shift
from models.hub import FilterCriteria, RankedHub
from models.jobsite import Jobsite, ScarcitySignal
from models.listing import Listing


def _none_if_all(value: Any) -> Any:
    # The UI sends "all" (or an empty string) for an unfiltered dropdown
    if isinstance(value, str) and value.strip().lower() in ("", "all"):
        return None
    return value


class ListingFilters(BaseModel):
    hub_ids: list[str] = Field(default_factory=list)
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    room_type: Optional[RoomType] = None
    shift: Optional[Shift] = None
    move_in_date: Optional[date] = None


class PlanMoveRequest(BaseModel):
    jobsite_id: Optional[str] = None
    jobsite_slug: Optional[str] = None

    budget_min: Optional[float] = Field(default=None, ge=0)
    budget_max: Optional[float] = Field(default=None, ge=0)
    # None means "use the configured default for this call site"
    commute_max: Optional[float] = None

    room_type: Optional[RoomType] = None
    shift: Optional[Shift] = None
    move_in_date: Optional[date] = None

    @field_validator("room_type", "shift", mode="before")
    @classmethod
    def _normalize_dropdowns(cls, value: Any) -> Any:
        return _none_if_all(value)

    @model_validator(mode="after")
    def _check_request(self) -> PlanMoveRequest:
        if not self.jobsite_id and not self.jobsite_slug:
            raise ValueError("Either jobsite_id or jobsite_slug is required")
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError(
                f"budget_min ({self.budget_min}) exceeds budget_max ({self.budget_max})"
            )
        return self

    def to_filter_criteria(self, default_commute_max: float) -> FilterCriteria:
        commute_max = (
            self.commute_max if self.commute_max is not None else default_commute_max
        )
        return FilterCriteria(
            budget_min=self.budget_min,
            budget_max=self.budget_max,
            commute_max=commute_max,
        )

    def to_listing_filters(self, hub_ids: list[str]) -> ListingFilters:
        return ListingFilters(
            hub_ids=hub_ids,
            budget_min=self.budget_min,
            budget_max=self.budget_max,
            room_type=self.room_type,
            shift=self.shift,
            move_in_date=self.move_in_date,
        )


class PlanMoveResponse(BaseModel):
    hubs: list[RankedHub] = Field(default_factory=list)
    listings: list[Listing] = Field(default_factory=list)
    jobsite: Optional[Jobsite] = None
    scarcity: ScarcitySignal = Field(default_factory=ScarcitySignal)

    @classmethod
    def empty(cls) -> PlanMoveResponse:
        """Fail-open response for a job site that could not be resolved."""
        return cls(
            hubs=[],
            listings=[],
            jobsite=None,
            scarcity=ScarcitySignal(listings_14d=0, avg_response_hours=None, is_scarce=True),
        )
