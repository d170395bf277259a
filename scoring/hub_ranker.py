"""Hub ranking: scores a job site's commute hubs for the Plan My Move flow.

Composite score is the sum of four sub-scores:

    inventory  0-40   more recent listings, better odds of a match
    budget     0-30   hub median rent vs. the middle of the user's budget
    commute    0-20   best-case commute (lower edge of the band)
    response   0-10   median host response time

A sub-score that has no data to work with is NoData, and resolves to a
neutral number of points when the composite is summed.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from config.ranking_weights import DEFAULT_WEIGHTS, RankingWeights
from models.hub import FilterCriteria, HubMetrics, RankedHub

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scored:
    points: float


@dataclass(frozen=True)
class NoData:
    pass


SubScore = Union[Scored, NoData]


def resolve(sub_score: SubScore, neutral_points: float) -> float:
    """Collapse a sub-score to points, using the neutral default for NoData."""
    if isinstance(sub_score, Scored):
        return sub_score.points
    return neutral_points


def is_eligible(hub: HubMetrics, filters: FilterCriteria) -> bool:
    """A hub qualifies only if the whole commute band fits under the ceiling."""
    return hub.commute_max <= filters.commute_max


def score_inventory(
    listing_count_30d: int, weights: RankingWeights = DEFAULT_WEIGHTS
) -> SubScore:
    return Scored(
        min(
            listing_count_30d * weights.inventory_points_per_listing,
            weights.inventory_max_points,
        )
    )


def score_budget(
    hub: HubMetrics,
    filters: FilterCriteria,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> tuple[SubScore, bool]:
    """Score how close the hub's median rent is to the middle of the budget.

    Returns (sub_score, budget_match). Needs both budget bounds and at least
    a median_rent_min; a missing median_rent_max counts as 0 in the average.
    Without that data the result is NoData and still counts as a match.
    """
    if not filters.has_budget or hub.median_rent_min is None:
        return NoData(), True

    hub_mid = (hub.median_rent_min + (hub.median_rent_max or 0)) / 2
    diff = abs(hub_mid - filters.budget_mid)

    for max_diff, points in weights.budget_tiers:
        if diff <= max_diff:
            return Scored(points), True
    return Scored(0), False


def score_commute(
    commute_min: int, weights: RankingWeights = DEFAULT_WEIGHTS
) -> SubScore:
    return Scored(
        max(0, weights.commute_max_points - commute_min / weights.commute_minutes_per_point)
    )


def score_response(
    median_response_hours: Optional[float],
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> SubScore:
    if median_response_hours is None:
        return NoData()
    for max_hours, points in weights.response_tiers:
        if median_response_hours <= max_hours:
            return Scored(points)
    return Scored(0)


def score_hub(
    hub: HubMetrics,
    filters: FilterCriteria,
    weights: RankingWeights = DEFAULT_WEIGHTS,
) -> RankedHub:
    """Compute the composite score and per-dimension breakdown for one hub."""
    budget, budget_match = score_budget(hub, filters, weights)
    breakdown = {
        "inventory": resolve(score_inventory(hub.listing_count_30d, weights), 0),
        "budget": resolve(budget, weights.budget_neutral_points),
        "commute": resolve(score_commute(hub.commute_min, weights), 0),
        "response": resolve(
            score_response(hub.median_response_hours, weights),
            weights.response_neutral_points,
        ),
    }

    return RankedHub(
        **hub.model_dump(include=set(HubMetrics.model_fields)),
        score=sum(breakdown.values()),
        budget_match=budget_match,
        score_breakdown=breakdown,
    )


def _rank_key(hub: RankedHub) -> tuple[float, str, str]:
    # Highest score first; equal scores fall back to name, then id
    return (-hub.score, hub.hub_name.lower(), hub.hub_id)


def rank_hubs(
    hubs: list[HubMetrics],
    filters: FilterCriteria,
    weights: Optional[RankingWeights] = None,
) -> list[RankedHub]:
    """Filter hubs by the commute ceiling, score them, and sort best-first.

    Returns every eligible hub; picking a top-N is up to the caller.
    """
    weights = weights or DEFAULT_WEIGHTS

    eligible = [h for h in hubs if is_eligible(h, filters)]
    logger.debug(
        f"{len(eligible)}/{len(hubs)} hubs within {filters.commute_max} min ceiling"
    )

    ranked = [score_hub(h, filters, weights) for h in eligible]
    ranked.sort(key=_rank_key)
    return ranked
