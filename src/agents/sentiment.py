"""
Sentiment Classifier.

Maps a numeric rating to "positive", "neutral" or "negative".
"""

from typing import Optional

from src.models.review import Review
import config.settings as settings


def classify(rating: Optional[float]) -> str:
    """
    Label a rating.

    > 4.0 is positive, < 2.0 is negative, everything else is neutral.
    An invalid rating (None or NaN) fails both comparisons and is neutral.
    """
    if rating is None:
        return "neutral"
    if rating > settings.POSITIVE_THRESHOLD:
        return "positive"
    if rating < settings.NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def label_review(review: Review) -> str:
    """
    Return the review's sentiment, classifying and caching it on first use.

    Mutates review.sentiment when it is not set yet.
    """
    if review.sentiment is None:
        review.sentiment = classify(review.rating)
    return review.sentiment
