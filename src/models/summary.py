"""
Aggregate summary models.

Outputs of the sentiment aggregator and the summary statistics engine.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class AppSentimentSummary:
    """Sentiment counts for a single app."""
    app_name: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def to_dict(self) -> Dict:
        return {
            "app_name": self.app_name,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


@dataclass
class LanguageSentimentSummary:
    """Sentiment counts for a single review language."""
    lang_name: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def to_dict(self) -> Dict:
        return {
            "lang_name": self.lang_name,
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


@dataclass
class SummaryStatistics:
    """
    Top-line statistics for the most-reviewed app.
    avg_rating is the raw (unrounded) mean over that app's reviews only.
    """
    most_reviewed_app: str = ""
    most_reviews: int = 0
    most_used_device: str = ""
    most_devices: int = 0
    avg_rating: float = 0

    @classmethod
    def empty(cls) -> "SummaryStatistics":
        """Zero-value result used for empty input."""
        return cls()

    def to_dict(self) -> Dict:
        """Convert to the external camelCase shape."""
        return {
            "mostReviewedApp": self.most_reviewed_app,
            "mostReviews": self.most_reviews,
            "mostUsedDevice": self.most_used_device,
            "mostDevices": self.most_devices,
            "avgRating": self.avg_rating,
        }
