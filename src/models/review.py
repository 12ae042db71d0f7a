"""
Review data models.

RawRow is the loosely-typed row produced by the tabular loader.
Review is the canonical, validated record produced by the normalizer.
"""

from dataclasses import dataclass, field, fields, asdict
from datetime import datetime
from typing import Dict, Mapping, Optional

# Column order of the source dataset
FIELD_NAMES = (
    "review_id",
    "app_name",
    "app_category",
    "review_text",
    "review_language",
    "rating",
    "review_date",
    "verified_purchase",
    "device_type",
    "num_helpful_votes",
    "app_version",
    "user_id",
    "user_age",
    "user_country",
    "user_gender",
)


@dataclass
class RawRow:
    """
    One row straight from tabular input.
    Every value is a raw string, or None when the column was absent.
    """
    review_id: Optional[str] = None
    app_name: Optional[str] = None
    app_category: Optional[str] = None
    review_text: Optional[str] = None
    review_language: Optional[str] = None
    rating: Optional[str] = None
    review_date: Optional[str] = None
    verified_purchase: Optional[str] = None
    device_type: Optional[str] = None
    num_helpful_votes: Optional[str] = None
    app_version: Optional[str] = None
    user_id: Optional[str] = None
    user_age: Optional[str] = None
    user_country: Optional[str] = None
    user_gender: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "RawRow":
        """Build a RawRow from a string-keyed mapping, ignoring unknown keys."""
        values = {}
        for name in FIELD_NAMES:
            value = data.get(name)
            values[name] = None if value is None else str(value)
        return cls(**values)

    def items(self):
        """Iterate (field_name, raw_value) pairs in column order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name)


@dataclass
class User:
    """User attributes nested under a Review."""
    user_id: Optional[int]  # None when the raw value was not numeric
    user_age: Optional[int]
    user_country: str
    user_gender: str = ""


@dataclass
class Review:
    """
    Canonical review record.

    Numeric and date fields are None when the raw value could not be
    parsed. The row itself is still kept in that case.
    """
    review_id: Optional[int]
    app_name: str
    app_category: str
    review_text: str
    review_language: str
    rating: Optional[float]
    review_date: Optional[datetime]
    verified_purchase: bool
    device_type: str
    num_helpful_votes: Optional[int]
    app_version: str
    user: User
    sentiment: Optional[str] = field(default=None)  # Set once by label_review()

    @property
    def has_valid_rating(self) -> bool:
        return self.rating is not None and self.rating == self.rating  # NaN != NaN

    def to_dict(self) -> Dict:
        """Convert review to a JSON-friendly dict."""
        data = asdict(self)
        data["review_date"] = self.review_date.isoformat() if self.review_date else None
        return data


# Design Notes:
#
# 1. RawRow has a fixed schema.
#    - Columns outside FIELD_NAMES are dropped by from_mapping
#    - A missing column is None and fails validation downstream
#
# 2. None on a Review means "present in the input but not parseable".
#    - Blank or "null" inputs never reach a Review at all
#
# 3. sentiment is written only by label_review().
