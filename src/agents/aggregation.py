"""
Sentiment Aggregator.

Tallies sentiment labels per app and per review language.
"""

import logging
from typing import Callable, Dict, List, Sequence

from src.agents.sentiment import label_review
from src.models.review import Review
from src.models.summary import AppSentimentSummary, LanguageSentimentSummary
import config.settings as settings

logger = logging.getLogger(__name__)


class SentimentAggregator:
    """
    Groups reviews along one dimension and counts sentiment labels.

    Every review visited is labelled through label_review(), so the
    sentiment is computed once and shared by both dimensions. This
    mutates the Review objects passed in.
    """

    def by_app(self, reviews: Sequence[Review]) -> List[AppSentimentSummary]:
        """
        Count sentiment per app.

        Args:
            reviews: Normalized reviews

        Returns:
            One summary per app, in order of first appearance
        """
        counts = self._tally(reviews, key=lambda r: r.app_name)
        summaries = [
            AppSentimentSummary(app_name=app, **labels)
            for app, labels in counts.items()
        ]
        logger.info(f"Aggregated sentiment for {len(summaries)} apps")
        return summaries

    def by_language(self, reviews: Sequence[Review]) -> List[LanguageSentimentSummary]:
        """
        Count sentiment per review language.

        Args:
            reviews: Normalized reviews

        Returns:
            One summary per language, in order of first appearance
        """
        counts = self._tally(reviews, key=lambda r: r.review_language)
        summaries = [
            LanguageSentimentSummary(lang_name=lang, **labels)
            for lang, labels in counts.items()
        ]
        logger.info(f"Aggregated sentiment for {len(summaries)} languages")
        return summaries

    def _tally(
        self,
        reviews: Sequence[Review],
        key: Callable[[Review], str]
    ) -> Dict[str, Dict[str, int]]:
        """Label each review and count labels per group key."""
        counts: Dict[str, Dict[str, int]] = {}

        for review in reviews:
            label = label_review(review)
            group = key(review)

            if group not in counts:
                counts[group] = {name: 0 for name in settings.SENTIMENT_LABELS}
            counts[group][label] += 1

        return counts


def aggregate_by_app(reviews: Sequence[Review]) -> List[AppSentimentSummary]:
    """Count sentiment per app. Sets review.sentiment on each review."""
    return SentimentAggregator().by_app(reviews)


def aggregate_by_language(reviews: Sequence[Review]) -> List[LanguageSentimentSummary]:
    """Count sentiment per language. Reuses any cached review.sentiment."""
    return SentimentAggregator().by_language(reviews)


# Design Notes:
#
# 1. Group order is first appearance in the input, not sorted.
#
# 2. Running by_app and by_language in either order gives the same labels.
#    - Whichever pass runs first caches the label on the review
