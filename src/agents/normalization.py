"""
Record Normalizer.

Validates raw rows and coerces them into canonical Review records.
Rows with an empty or "null" required field are dropped.
"""

import logging
from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence, Union

from src.models.load_result import LoadResult
from src.models.review import RawRow, Review, User
from src.utils.coercion import (
    is_blank_or_null,
    parse_bool,
    parse_date,
    parse_float,
    parse_int,
)
import config.settings as settings

logger = logging.getLogger(__name__)


class RecordNormalizer:
    """
    Turns loosely-typed RawRows into Reviews.

    Validation is all-or-nothing per row: one failing required field
    drops the whole row. Coercion never fails a row; unparseable
    numbers and dates become None on the Review.
    """

    def __init__(
        self,
        null_token: str = settings.NULL_TOKEN,
        optional_fields: Sequence[str] = settings.OPTIONAL_FIELDS
    ):
        """
        Initialize normalizer.

        Args:
            null_token: Literal treated as missing (case-insensitive)
            optional_fields: Fields exempt from the empty/null check
        """
        self.null_token = null_token
        self.optional_fields = set(optional_fields)
        self.last_drop_reasons: Dict[str, int] = {}

    def normalize(
        self,
        rows: Union[LoadResult, Sequence[Union[RawRow, Mapping]]]
    ) -> List[Review]:
        """
        Validate and coerce rows.

        Args:
            rows: RawRows or plain mappings, or a LoadResult

        Returns:
            Reviews in input order, with invalid rows removed

        Raises:
            ValueError: If rows is None
        """
        if rows is None:
            raise ValueError("normalize(rows) is required")

        if isinstance(rows, LoadResult):
            rows = rows.data

        reviews = []
        drop_reasons = Counter()

        for index, row in enumerate(rows):
            raw = row if isinstance(row, RawRow) else RawRow.from_mapping(row)

            failing = self._first_failing_field(raw)
            if failing:
                drop_reasons[failing] += 1
                logger.debug(f"Dropped row {index}: field '{failing}' is empty or null")
                continue

            reviews.append(self._to_review(raw))

        self.last_drop_reasons = dict(drop_reasons)
        dropped = sum(drop_reasons.values())

        logger.info(f"Normalized {len(reviews)} reviews ({dropped} rows dropped)")
        return reviews

    def _first_failing_field(self, raw: RawRow) -> Optional[str]:
        """Return the first required field that is empty or null, if any."""
        for name, value in raw.items():
            if name in self.optional_fields:
                continue
            if is_blank_or_null(value, self.null_token):
                return name
        return None

    def _to_review(self, raw: RawRow) -> Review:
        """Coerce a validated RawRow field by field."""
        user = User(
            user_id=parse_int(raw.user_id),
            user_age=parse_int(raw.user_age),
            user_country=raw.user_country,
            user_gender=raw.user_gender or ""
        )

        return Review(
            review_id=parse_int(raw.review_id),
            app_name=raw.app_name,
            app_category=raw.app_category,
            review_text=raw.review_text,
            review_language=raw.review_language,
            rating=parse_float(raw.rating),
            review_date=parse_date(raw.review_date),
            verified_purchase=parse_bool(raw.verified_purchase),
            device_type=raw.device_type,
            num_helpful_votes=parse_int(raw.num_helpful_votes),
            app_version=raw.app_version,
            user=user
        )


def normalize(rows: Union[LoadResult, Sequence[Union[RawRow, Mapping]]]) -> List[Review]:
    """Validate and coerce rows with default settings."""
    return RecordNormalizer().normalize(rows)


# Design Notes:
#
# 1. Validation runs on the raw strings, coercion runs afterwards.
#    - "abc" in review_id passes validation and becomes None
#    - "null" in review_id fails validation and drops the row
#
# 2. last_drop_reasons counts the first failing field per row only.
#
# 3. user_gender keeps its raw value when truthy, including "null".
