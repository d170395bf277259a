"""Job-site housing scarcity signal."""

from typing import Optional

from config.ranking_weights import SCARCE_LISTING_THRESHOLD
from models.jobsite import JobsiteMetrics, ScarcitySignal


def classify_scarcity(metrics: Optional[JobsiteMetrics]) -> ScarcitySignal:
    """Flag a job site as scarce when it has few listings in the last 14 days.

    Missing metrics are treated as scarce, not unknown.
    """
    if metrics is None:
        return ScarcitySignal(listings_14d=0, avg_response_hours=None, is_scarce=True)

    return ScarcitySignal(
        listings_14d=metrics.listings_14d,
        avg_response_hours=metrics.avg_response_hours,
        is_scarce=metrics.listings_14d < SCARCE_LISTING_THRESHOLD,
    )
