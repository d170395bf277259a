"""Hub ranking weights and tier configurations.

These are separated from the scoring logic so they're easy to tune.
"""

from pydantic import BaseModel

# Inventory: points per active listing in the trailing 30 days, capped
INVENTORY_POINTS_PER_LISTING = 4
INVENTORY_MAX_POINTS = 40

# Budget fit: (max |hub_mid - user_mid| in dollars, points), checked in order.
# Anything past the last tier scores 0 and is flagged as a budget mismatch.
BUDGET_TIERS: list[tuple[float, float]] = [
    (100, 30),
    (200, 20),
    (300, 10),
]
BUDGET_NEUTRAL_POINTS = 15

# Commute: full points at a 0-minute best case, one point lost every 3 minutes
COMMUTE_MAX_POINTS = 20
COMMUTE_MINUTES_PER_POINT = 3

# Host response time: (max median hours, points), checked in order
RESPONSE_TIERS: list[tuple[float, float]] = [
    (2, 10),
    (6, 7),
    (12, 4),
    (24, 2),
]
RESPONSE_NEUTRAL_POINTS = 5

# A job site with fewer recent listings than this is flagged as scarce
SCARCE_LISTING_THRESHOLD = 5


class RankingWeights(BaseModel):
    """Bundle of the constants above, overridable per call."""

    model_config = {"frozen": True}

    inventory_points_per_listing: float = INVENTORY_POINTS_PER_LISTING
    inventory_max_points: float = INVENTORY_MAX_POINTS
    budget_tiers: tuple[tuple[float, float], ...] = tuple(BUDGET_TIERS)
    budget_neutral_points: float = BUDGET_NEUTRAL_POINTS
    commute_max_points: float = COMMUTE_MAX_POINTS
    commute_minutes_per_point: float = COMMUTE_MINUTES_PER_POINT
    response_tiers: tuple[tuple[float, float], ...] = tuple(RESPONSE_TIERS)
    response_neutral_points: float = RESPONSE_NEUTRAL_POINTS


DEFAULT_WEIGHTS = RankingWeights()
