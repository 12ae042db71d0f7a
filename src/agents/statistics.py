"""
Summary Statistics Engine.

Finds the most-reviewed app, its most-used device and its average rating.
"""

import logging
import math
from typing import Dict, Sequence

from src.models.review import Review
from src.models.summary import SummaryStatistics

logger = logging.getLogger(__name__)


class _AppStats:
    """Running totals for one app."""

    def __init__(self):
        self.count = 0
        self.rating_sum = 0.0
        self.device_counts: Dict[str, int] = {}

    def add(self, review: Review) -> None:
        self.count += 1
        # An unparseable rating poisons the mean, like NaN would
        self.rating_sum += review.rating if review.has_valid_rating else math.nan
        device = review.device_type
        self.device_counts[device] = self.device_counts.get(device, 0) + 1


class SummaryStatisticsEngine:
    """
    Computes top-line statistics.

    Ties are broken by input order: the first app (or device) to reach
    the maximum count wins.
    """

    def summarize(self, reviews: Sequence[Review]) -> SummaryStatistics:
        """
        Summarize reviews.

        Args:
            reviews: Normalized reviews

        Returns:
            SummaryStatistics, or the zero-value result for empty input
        """
        if not isinstance(reviews, (list, tuple)) or len(reviews) == 0:
            logger.info("No reviews to summarize, returning empty statistics")
            return SummaryStatistics.empty()

        app_stats: Dict[str, _AppStats] = {}
        for review in reviews:
            if review.app_name not in app_stats:
                app_stats[review.app_name] = _AppStats()
            app_stats[review.app_name].add(review)

        most_reviewed_app = ""
        most_reviews = -1
        for app, stats in app_stats.items():
            if stats.count > most_reviews:
                most_reviewed_app, most_reviews = app, stats.count

        top = app_stats[most_reviewed_app]

        most_used_device = ""
        most_devices = -1
        for device, count in top.device_counts.items():
            if count > most_devices:
                most_used_device, most_devices = device, count

        result = SummaryStatistics(
            most_reviewed_app=most_reviewed_app,
            most_reviews=most_reviews,
            most_used_device=most_used_device,
            most_devices=most_devices,
            avg_rating=top.rating_sum / top.count
        )

        logger.info(
            f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews, "
            f"top device {most_used_device}, avg rating {result.avg_rating})"
        )
        return result


def summarize(reviews: Sequence[Review]) -> SummaryStatistics:
    """Summarize reviews with the default engine."""
    return SummaryStatisticsEngine().summarize(reviews)


# Design Notes:
#
# 1. Ties keep the earlier key (strict > when scanning).
#    - Applies to both the app and the device scan
#
# 2. avg_rating covers the most-reviewed app only.
#    - One invalid rating in that app makes it NaN
#    - PipelineResult.to_dict() reports a non-finite mean as null
