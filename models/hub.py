from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class HubMetrics(BaseModel):
    """Pre-aggregated metrics for one commute hub of a job site."""

    # Identity
    hub_id: str
    jobsite_id: str
    hub_name: str = ""

    # Commute band, inclusive minutes
    commute_min: int = Field(ge=0)
    commute_max: int = Field(ge=0)

    # Inventory
    listing_count_30d: int = Field(default=0, ge=0)
    listing_count_14d: int = Field(default=0, ge=0)

    # Rent and responsiveness (None when there is no data yet)
    median_rent_min: Optional[float] = Field(default=None, ge=0)
    median_rent_max: Optional[float] = Field(default=None, ge=0)
    median_response_hours: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_invariants(self) -> HubMetrics:
        if self.commute_min > self.commute_max:
            raise ValueError(
                f"commute_min ({self.commute_min}) exceeds commute_max ({self.commute_max})"
            )
        if self.listing_count_14d > self.listing_count_30d:
            raise ValueError(
                "listing_count_14d cannot exceed listing_count_30d "
                f"({self.listing_count_14d} > {self.listing_count_30d})"
            )
        return self

    @property
    def commute_label(self) -> str:
        return f"{self.commute_min}-{self.commute_max} min"


class FilterCriteria(BaseModel):
    """User filters consumed by the hub ranker.

    commute_max is not range-checked here: a non-positive ceiling simply
    leaves no eligible hubs.
    """

    budget_min: Optional[float] = Field(default=None, ge=0)
    budget_max: Optional[float] = Field(default=None, ge=0)
    commute_max: float

    @model_validator(mode="after")
    def _check_budget_order(self) -> FilterCriteria:
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError(
                f"budget_min ({self.budget_min}) exceeds budget_max ({self.budget_max})"
            )
        return self

    @property
    def has_budget(self) -> bool:
        return self.budget_min is not None and self.budget_max is not None

    @property
    def budget_mid(self) -> Optional[float]:
        if not self.has_budget:
            return None
        return (self.budget_min + self.budget_max) / 2


class RankedHub(HubMetrics):
    # Scoring (populated by the hub ranker)
    score: float = 0.0
    budget_match: bool = True
    score_breakdown: dict[str, float] = Field(default_factory=dict)
