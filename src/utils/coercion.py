"""
Coercion utility.

Permissive string-to-value parsers used by the record normalizer.
None of these raise on malformed content; an unparseable value comes
back as None so callers have an explicit invalid path.
"""

import re
from datetime import datetime
from typing import Optional

import pandas as pd

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading base-10 integer of a string.

    "42" -> 42, " 7 reviews" -> 7, "3.9" -> 3, "abc" -> None
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_float(value: Optional[str]) -> Optional[float]:
    """
    Parse the leading decimal literal of a string.

    "4.5" -> 4.5, "3 stars" -> 3.0, "1e1" -> 10.0, "n/a" -> None
    """
    if value is None:
        return None
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return None
    literal = match.group(1).replace("Infinity", "inf")
    return float(literal)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a date/time string with pandas, returning None when it is not a date."""
    if value is None:
        return None
    timestamp = pd.to_datetime(str(value).strip(), errors="coerce")
    if pd.isna(timestamp):
        return None
    return timestamp.to_pydatetime()


def parse_bool(value: Optional[str]) -> bool:
    """True iff the trimmed value equals "true" case-insensitively."""
    if value is None:
        return False
    return str(value).strip().lower() == "true"


def is_blank_or_null(value: Optional[str], null_token: str = "null") -> bool:
    """True when a raw field is absent, empty after trimming, or the null token."""
    if value is None:
        return True
    text = str(value).strip()
    return text == "" or text.lower() == null_token.lower()
