"""Hosted backend provider, read through its PostgREST interface."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from config.settings import Settings
from models.hub import HubMetrics
from models.jobsite import Jobsite, JobsiteMetrics
from models.listing import Listing
from models.plan import ListingFilters
from providers.base import HousingDataProvider, ProviderError

logger = logging.getLogger(__name__)

Params = list[tuple[str, str]]


def build_listing_params(
    jobsite_id: str, filters: Optional[ListingFilters] = None
) -> Params:
    """Translate listing filters into PostgREST query parameters."""
    params: Params = [
        ("select", "*,profiles(display_name)"),
        ("jobsite_id", f"eq.{jobsite_id}"),
        ("is_active", "eq.true"),
        ("order", "created_at.desc"),
    ]
    if filters is None:
        return params

    if filters.hub_ids:
        params.append(("hub_id", f"in.({','.join(filters.hub_ids)})"))
    # Rent ranges overlap the budget when min <= budget_max and max >= budget_min
    if filters.budget_max is not None:
        params.append(("rent_min", f"lte.{filters.budget_max:g}"))
    if filters.budget_min is not None:
        params.append(("rent_max", f"gte.{filters.budget_min:g}"))
    if filters.room_type is not None:
        params.append(("room_type", f"eq.{filters.room_type.value}"))
    if filters.shift is not None:
        params.append(("shift", f"eq.{filters.shift.value}"))
    if filters.move_in_date is not None:
        params.append(("move_in", f"gte.{filters.move_in_date.isoformat()}"))
    return params


class SupabaseProvider(HousingDataProvider):
    source_name = "Supabase"

    def __init__(self, settings: Settings):
        super().__init__(settings)
        if not settings.is_backend_configured:
            raise ProviderError("Supabase URL and anon key are not configured")
        self.base_url = f"{settings.supabase_url.rstrip('/')}/rest/v1"
        self.headers = {
            "apikey": settings.supabase_anon_key,
            "Authorization": f"Bearer {settings.supabase_anon_key}",
            "Content-Type": "application/json",
        }

    def _get(self, table: str, params: Params) -> list[dict]:
        """GET rows from a table or view."""
        try:
            response = httpx.get(
                f"{self.base_url}/{table}",
                headers=self.headers,
                params=params,
                timeout=self.settings.request_timeout_seconds,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Supabase HTTP error for {table}: {e.response.status_code} {e.response.text}"
            )
            raise ProviderError(f"Supabase error for {table}: {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Supabase request error for {table}: {e}")
            raise ProviderError(f"Supabase request failed for {table}") from e

    def _parse(self, model: type, rows: list[dict], table: str) -> list:
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error(f"Malformed {table} row: {e}")
            raise ProviderError(f"Malformed {table} row") from e

    def get_jobsites(self) -> list[Jobsite]:
        rows = self._get("jobsites", [("is_active", "eq.true"), ("order", "name.asc")])
        return self._parse(Jobsite, rows, "jobsites")

    def get_jobsite_by_slug(self, slug: str) -> Optional[Jobsite]:
        rows = self._get("jobsites", [("slug", f"eq.{slug}"), ("is_active", "eq.true")])
        jobsites = self._parse(Jobsite, rows, "jobsites")
        return jobsites[0] if jobsites else None

    def get_hub_metrics(self, jobsite_id: str) -> list[HubMetrics]:
        rows = self._get(
            "hub_metrics_30d",
            [("jobsite_id", f"eq.{jobsite_id}"), ("order", "listing_count_30d.desc")],
        )
        hubs = self._parse(HubMetrics, rows, "hub_metrics_30d")
        logger.info(f"Fetched metrics for {len(hubs)} hubs of jobsite {jobsite_id}")
        return hubs

    def get_jobsite_metrics(self, jobsite_id: str) -> Optional[JobsiteMetrics]:
        rows = self._get("jobsite_metrics", [("jobsite_id", f"eq.{jobsite_id}")])
        metrics = self._parse(JobsiteMetrics, rows, "jobsite_metrics")
        return metrics[0] if metrics else None

    def get_listings_for_jobsite(
        self, jobsite_id: str, filters: Optional[ListingFilters] = None
    ) -> list[Listing]:
        rows = self._get("listings", build_listing_params(jobsite_id, filters))
        listings = self._parse(Listing, rows, "listings")
        logger.info(f"Fetched {len(listings)} listings for jobsite {jobsite_id}")
        return listings
