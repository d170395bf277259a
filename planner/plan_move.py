"""Plan My Move: rank a job site's hubs and pull listings for the best ones."""

import logging
from typing import Optional

from config.settings import Settings
from models.jobsite import Jobsite
from models.listing import Listing
from models.plan import PlanMoveRequest, PlanMoveResponse
from providers.base import HousingDataProvider
from providers.demo import demo_listings
from scoring.hub_ranker import rank_hubs
from scoring.scarcity import classify_scarcity

logger = logging.getLogger(__name__)


def merge_listings(fetched: list[Listing], showcase: list[Listing]) -> list[Listing]:
    """Fetched listings first, then showcase listings not already present."""
    seen_ids = {l.id for l in fetched}
    return fetched + [l for l in showcase if l.id not in seen_ids]


def _showcase(settings: Settings) -> list[Listing]:
    return demo_listings() if settings.include_demo_listings else []


def resolve_jobsite(
    request: PlanMoveRequest, provider: HousingDataProvider
) -> tuple[Optional[Jobsite], Optional[str]]:
    """Look the job site up by slug, falling back to the raw id.

    Returns (jobsite record or None, id to query with or None).
    """
    jobsite = None
    if request.jobsite_slug:
        jobsite = provider.get_jobsite_by_slug(request.jobsite_slug)
        if jobsite is None:
            logger.warning(f"No active jobsite with slug '{request.jobsite_slug}'")
    jobsite_id = jobsite.id if jobsite else request.jobsite_id
    return jobsite, jobsite_id


def plan_move(
    request: PlanMoveRequest,
    provider: HousingDataProvider,
    settings: Settings,
    filter_listings: bool = True,
) -> PlanMoveResponse:
    """Build the Plan My Move response for one request.

    An unresolvable job site yields a scarce response with no hubs and no
    listings instead of an error. With filter_listings off, listings are fetched for the whole job
    site without the request's filters.
    """
    jobsite, jobsite_id = resolve_jobsite(request, provider)
    if jobsite_id is None:
        return PlanMoveResponse.empty()

    label = jobsite.display_name if jobsite else jobsite_id
    default_commute = (
        settings.default_commute_max if filter_listings else settings.browse_commute_max
    )
    criteria = request.to_filter_criteria(default_commute)

    hub_metrics = provider.get_hub_metrics(jobsite_id)
    ranked = rank_hubs(hub_metrics, criteria)
    logger.info(
        f"{label}: {len(ranked)}/{len(hub_metrics)} hubs within "
        f"{criteria.commute_max:g} min"
    )

    if filter_listings:
        top_hub_ids = [h.hub_id for h in ranked[: settings.top_hub_count]]
        listings = provider.get_listings_for_jobsite(
            jobsite_id, request.to_listing_filters(top_hub_ids)
        )
    else:
        listings = provider.get_listings_for_jobsite(jobsite_id)

    scarcity = classify_scarcity(provider.get_jobsite_metrics(jobsite_id))
    if scarcity.is_scarce:
        logger.info(f"{label}: scarce ({scarcity.listings_14d} listings in 14 days)")

    listings = merge_listings(listings, _showcase(settings))
    logger.info(f"{label}: returning {len(listings)} listings")

    return PlanMoveResponse(
        hubs=ranked,
        listings=listings,
        jobsite=jobsite,
        scarcity=scarcity,
    )


def browse_jobsite(
    slug: str,
    provider: HousingDataProvider,
    settings: Settings,
    commute_max: Optional[float] = None,
) -> PlanMoveResponse:
    """Unfiltered view of a job site: ranked hubs and all its listings."""
    request = PlanMoveRequest(jobsite_slug=slug, commute_max=commute_max)
    return plan_move(request, provider, settings, filter_listings=False)
