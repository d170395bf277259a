"""Jobsite Housing Planner: Plan My Move from the command line.

Usage:
    python main.py --list-jobsites                       # Show available job sites
    python main.py --jobsite tsmc-arizona                # Browse a job site
    python main.py --jobsite intel-ohio --budget-min 600 --budget-max 1000 --commute-max 45
    python main.py --jobsite intel-ohio --room-type private_room --json
"""

import argparse
import logging
import sys
from datetime import date

from pydantic import ValidationError

from config.settings import Settings
from models.plan import PlanMoveRequest, PlanMoveResponse
from planner.plan_move import browse_jobsite, plan_move
from providers.base import HousingDataProvider, ProviderError
from providers.registry import get_provider

logger = logging.getLogger("jobsite_planner")


def has_filters(args: argparse.Namespace) -> bool:
    return any(
        value is not None
        for value in (
            args.budget_min,
            args.budget_max,
            args.commute_max,
            args.room_type,
            args.shift,
            args.move_in,
        )
    )


def log_jobsites(provider: HousingDataProvider) -> None:
    for jobsite in provider.get_jobsites():
        logger.info(f"  {jobsite.slug:<20} {jobsite.display_name}")


def log_plan(response: PlanMoveResponse, top: int) -> None:
    if response.jobsite is None:
        logger.warning("Jobsite not found")
    else:
        logger.info(f"Plan for {response.jobsite.display_name}")

    if not response.hubs:
        logger.info("No hubs fit within the commute limit")
    for rank, hub in enumerate(response.hubs[:top], start=1):
        breakdown = " ".join(
            f"{k[0].upper()}:{v:.1f}" for k, v in hub.score_breakdown.items()
        )
        budget_flag = "" if hub.budget_match else " (over/under budget)"
        logger.info(
            f"  #{rank} [{hub.score:.1f}] {hub.hub_name} | {hub.commute_label} | "
            f"{hub.listing_count_30d} listings/30d | {breakdown}{budget_flag}"
        )

    for listing in response.listings[:20]:
        demo = " [demo]" if listing.is_demo else ""
        logger.info(
            f"  {listing.price_text()} | {listing.room_type_label()} | "
            f"{listing.city} | {listing.title}{demo}"
        )

    scarcity = response.scarcity
    status = "SCARCE" if scarcity.is_scarce else "ok"
    response_hours = (
        f"{scarcity.avg_response_hours:.1f}h"
        if scarcity.avg_response_hours is not None
        else "n/a"
    )
    logger.info(
        f"Housing supply: {status}, {scarcity.listings_14d} listings in 14 days, "
        f"avg host response {response_hours}"
    )


def main(args: argparse.Namespace) -> int:
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        provider = get_provider(settings)
        logger.info(f"Using {provider.source_name} provider")

        if args.list_jobsites:
            log_jobsites(provider)
            return 0

        if has_filters(args):
            request = PlanMoveRequest(
                jobsite_id=args.jobsite_id,
                jobsite_slug=args.jobsite,
                budget_min=args.budget_min,
                budget_max=args.budget_max,
                commute_max=args.commute_max,
                room_type=args.room_type,
                shift=args.shift,
                move_in_date=args.move_in,
            )
            response = plan_move(request, provider, settings)
        elif args.jobsite:
            response = browse_jobsite(args.jobsite, provider, settings)
        else:
            request = PlanMoveRequest(jobsite_id=args.jobsite_id)
            response = plan_move(request, provider, settings, filter_listings=False)
    except ValidationError as e:
        logger.error(f"Invalid request: {e}")
        return 2
    except ProviderError as e:
        logger.error(f"Failed to build plan: {e}")
        return 1

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        log_plan(response, args.top or settings.top_hub_count)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Jobsite Housing Planner")
    parser.add_argument("--jobsite", type=str, default=None, help="Jobsite slug (e.g. tsmc-arizona)")
    parser.add_argument("--jobsite-id", type=str, default=None, help="Jobsite id, when the slug is unknown")
    parser.add_argument("--budget-min", type=float, default=None)
    parser.add_argument("--budget-max", type=float, default=None)
    parser.add_argument("--commute-max", type=float, default=None, help="Max commute in minutes")
    parser.add_argument("--room-type", type=str, default=None, help="private_room, shared_room, entire_place, or all")
    parser.add_argument("--shift", type=str, default=None, help="day, swing, night, or all")
    parser.add_argument("--move-in", type=date.fromisoformat, default=None, help="Earliest move-in date (YYYY-MM-DD)")
    parser.add_argument("--top", type=int, default=None, help="How many hubs to print")
    parser.add_argument("--json", action="store_true", help="Print the full response as JSON")
    parser.add_argument("--list-jobsites", action="store_true", help="List available job sites and exit")
    return parser


if __name__ == "__main__":
    parser = build_parser()
    args = parser.parse_args()
    if not (args.list_jobsites or args.jobsite or args.jobsite_id):
        parser.error("one of --jobsite, --jobsite-id or --list-jobsites is required")
    sys.exit(main(args))
