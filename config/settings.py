"""
Configuration settings for Sentiment Pulse.

Centralized configuration for the loader, normalizer, classifier
and CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("SENTIMENT_PULSE_DATA_ROOT", str(PROJECT_ROOT / "data")))

# Tabular loading
DELIMITERS_TO_GUESS = [",", ";", "\t", "|"]
DELIMITER_SNIFF_LINES = 10  # Lines inspected when guessing the delimiter
FILE_ENCODING = "utf-8-sig"  # Strips a leading BOM

# Record normalization
NULL_TOKEN = "null"  # Compared case-insensitively after trimming
OPTIONAL_FIELDS = ("user_gender",)  # Exempt from the empty/null check

# Sentiment thresholds (exclusive)
POSITIVE_THRESHOLD = 4.0  # rating > 4.0 -> positive
NEGATIVE_THRESHOLD = 2.0  # rating < 2.0 -> negative
SENTIMENT_LABELS = ("positive", "neutral", "negative")

# Logging
LOG_LEVEL = os.getenv("SENTIMENT_PULSE_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Design Notes:
#
# 1. Thresholds are exclusive on both sides.
#    - 4.0 and 2.0 themselves classify as neutral
#
# 2. SENTIMENT_LABELS fixes the counter order in every aggregate.
#    - The summary dataclasses take these names as keyword fields
#
# 3. DATA_ROOT is only a fallback.
#    - A path that exists as given is always read from where it is
