"""In-memory provider backed by the built-in demo catalog."""

import logging
from typing import Optional

from config.demo_catalog import DEMO_HUBS, DEMO_JOBSITES, DEMO_LISTINGS
from models.hub import HubMetrics
from models.jobsite import Jobsite, JobsiteMetrics
from models.listing import Listing
from models.plan import ListingFilters
from providers.base import HousingDataProvider

logger = logging.getLogger(__name__)


def demo_jobsite_id(slug: str) -> str:
    return f"demo-{slug}"


def demo_hub_id(slug: str, index: int) -> str:
    return f"demo-{slug}-hub-{index}"


def _demo_hub_metrics(slug: str) -> list[HubMetrics]:
    """Hub metrics that taper off with distance from the job site.

    Nearer hubs get more inventory, cheaper rent, and faster hosts.
    """
    hubs = []
    for i, (name, commute_min, commute_max) in enumerate(DEMO_HUBS.get(slug, [])):
        count_30d = max(1, 5 - i)
        hubs.append(
            HubMetrics(
                hub_id=demo_hub_id(slug, i),
                jobsite_id=demo_jobsite_id(slug),
                hub_name=name,
                commute_min=commute_min,
                commute_max=commute_max,
                listing_count_30d=count_30d,
                listing_count_14d=count_30d // 2,
                median_rent_min=700 + 50 * i,
                median_rent_max=900 + 75 * i,
                median_response_hours=2.0 + 5 * i,
            )
        )
    return hubs


def _to_listing(raw: dict) -> Listing:
    data = dict(raw)
    slug = data.pop("jobsite_slug", None)
    hub_name = data.pop("hub_name", None)
    if slug:
        data["jobsite_id"] = demo_jobsite_id(slug)
        for i, (name, _, _) in enumerate(DEMO_HUBS.get(slug, [])):
            if name == hub_name:
                data["hub_id"] = demo_hub_id(slug, i)
    return Listing(is_demo=True, **data)


def demo_listings() -> list[Listing]:
    """All showcase listings, fresh copies each call."""
    return [_to_listing(raw) for raw in DEMO_LISTINGS]


def listing_matches(listing: Listing, filters: Optional[ListingFilters]) -> bool:
    """Apply listing filters in memory, the way the backend query does.

    Comparisons against a missing value never match.
    """
    if filters is None:
        return True
    if filters.hub_ids and listing.hub_id not in filters.hub_ids:
        return False
    if filters.budget_max is not None:
        if listing.rent_min is None or listing.rent_min > filters.budget_max:
            return False
    if filters.budget_min is not None:
        if listing.rent_max is None or listing.rent_max < filters.budget_min:
            return False
    if filters.room_type is not None and listing.room_type != filters.room_type:
        return False
    if filters.shift is not None and listing.shift != filters.shift:
        return False
    if filters.move_in_date is not None:
        if listing.move_in is None or listing.move_in < filters.move_in_date:
            return False
    return True


class DemoProvider(HousingDataProvider):
    source_name = "Demo"

    def get_jobsites(self) -> list[Jobsite]:
        jobsites = [self._jobsite(slug) for slug in DEMO_JOBSITES]
        return sorted(jobsites, key=lambda j: j.name)

    def get_jobsite_by_slug(self, slug: str) -> Optional[Jobsite]:
        if slug not in DEMO_JOBSITES:
            return None
        return self._jobsite(slug)

    def get_hub_metrics(self, jobsite_id: str) -> list[HubMetrics]:
        slug = self._slug_for(jobsite_id)
        if slug is None:
            return []
        hubs = _demo_hub_metrics(slug)
        return sorted(hubs, key=lambda h: h.listing_count_30d, reverse=True)

    def get_jobsite_metrics(self, jobsite_id: str) -> Optional[JobsiteMetrics]:
        slug = self._slug_for(jobsite_id)
        if slug is None:
            return None
        hubs = _demo_hub_metrics(slug)
        name, city, state = DEMO_JOBSITES[slug]
        response_hours = [
            h.median_response_hours for h in hubs if h.median_response_hours is not None
        ]
        return JobsiteMetrics(
            jobsite_id=jobsite_id,
            slug=slug,
            jobsite_name=name,
            city=city,
            state=state,
            listings_14d=sum(h.listing_count_14d for h in hubs),
            avg_response_hours=(
                sum(response_hours) / len(response_hours) if response_hours else None
            ),
            total_active_listings=sum(h.listing_count_30d for h in hubs),
        )

    def get_listings_for_jobsite(
        self, jobsite_id: str, filters: Optional[ListingFilters] = None
    ) -> list[Listing]:
        listings = [
            l
            for l in demo_listings()
            if l.jobsite_id == jobsite_id and listing_matches(l, filters)
        ]
        logger.info(f"Demo: {len(listings)} listings for jobsite {jobsite_id}")
        return listings

    @staticmethod
    def _jobsite(slug: str) -> Jobsite:
        name, city, state = DEMO_JOBSITES[slug]
        return Jobsite(id=demo_jobsite_id(slug), name=name, city=city, state=state, slug=slug)

    @staticmethod
    def _slug_for(jobsite_id: str) -> Optional[str]:
        for slug in DEMO_JOBSITES:
            if demo_jobsite_id(slug) == jobsite_id:
                return slug
        return None
