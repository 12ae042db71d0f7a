"""
Tabular Loader.

Reads a delimited text source (comma, semicolon, tab or pipe) into
RawRows. All values stay strings; malformed rows are reported as
non-fatal diagnostics.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from src.models.load_result import LoadResult, ParseIssue
from src.models.review import RawRow
import config.settings as settings

logger = logging.getLogger(__name__)


class TabularLoader:
    """
    Loads delimited review exports with pandas.

    The header line names the fields, blank lines are skipped and no
    numeric or date typing is attempted.
    """

    def __init__(
        self,
        delimiters: Optional[List[str]] = None,
        data_root: Optional[str] = None,
        encoding: str = settings.FILE_ENCODING
    ):
        """
        Initialize loader.

        Args:
            delimiters: Candidate delimiters, in priority order
            data_root: Fallback directory for relative paths that don't exist
            encoding: Text encoding of source files
        """
        self.delimiters = delimiters or list(settings.DELIMITERS_TO_GUESS)
        self.data_root = Path(data_root) if data_root else settings.DATA_ROOT
        self.encoding = encoding

    def load(self, source: str) -> LoadResult:
        """
        Load a delimited file.

        Args:
            source: Path to the file. If it doesn't exist, the same name
                    under data_root is tried.

        Returns:
            LoadResult with parsed rows, diagnostics and metadata

        Raises:
            ValueError: If source is empty
            FileNotFoundError: If neither location exists
        """
        if not source:
            raise ValueError("load(source) is required")

        path = self._resolve(source)
        raw = path.read_bytes()

        encoding_issues: List[ParseIssue] = []
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            # Undecodable bytes become U+FFFD and the rest of the file still loads
            text = raw.decode(self.encoding, errors="replace")
            line = text[:text.index("\ufffd")].count("\n") + 1
            encoding_issues.append(ParseIssue(
                code="InvalidEncoding",
                message=f"Invalid {self.encoding} byte(s) replaced, first on line {line}: {e.reason}"
            ))
            logger.warning(f"{path}: {encoding_issues[0]}")

        logger.info(f"Read {len(text)} characters from {path}")

        result = self.load_text(text, source=str(path))
        result.errors[:0] = encoding_issues
        return result

    def load_text(self, text: str, source: str = "<string>") -> LoadResult:
        """
        Parse delimited text already in memory.

        Args:
            text: Delimited text with a header line
            source: Label recorded in the result metadata

        Returns:
            LoadResult with parsed rows, diagnostics and metadata
        """
        if text is None:
            raise ValueError("load_text(text) is required")

        if not text.strip():
            logger.warning(f"Source {source} is empty, no rows loaded")
            return LoadResult(meta={"delimiter": None, "fields": [], "source": source})

        delimiter = self.detect_delimiter(text)
        header = next(csv.reader(io.StringIO(text), delimiter=delimiter), [])
        expected = len(header)

        issues: List[ParseIssue] = []

        def _on_bad_line(bad_line: List[str]) -> None:
            issues.append(ParseIssue(
                code="TooManyFields",
                message=f"Too many fields: expected {expected} but parsed {len(bad_line)}"
            ))
            return None

        df = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_on_bad_line
        )
        df.columns = [str(c).strip() for c in df.columns]

        # Short rows are kept; pandas fills their missing cells with NaN
        short_rows = df.isna().any(axis=1)
        for idx in df.index[short_rows]:
            parsed = int(df.loc[idx].notna().sum())
            issues.append(ParseIssue(
                code="TooFewFields",
                message=f"Too few fields: expected {expected} but parsed {parsed}",
                row=int(idx)
            ))

        records = df.astype(object).where(df.notna(), None).to_dict(orient="records")
        rows = [RawRow.from_mapping(record) for record in records if record]

        if issues:
            logger.warning(f"Loader reported {len(issues)} error(s). First: {issues[0]}")

        logger.info(
            f"Loaded {len(rows)} rows from {source} "
            f"(delimiter={delimiter!r}, {len(df.columns)} fields)"
        )

        return LoadResult(
            data=rows,
            errors=issues,
            meta={"delimiter": delimiter, "fields": list(df.columns), "source": source}
        )

    def detect_delimiter(self, text: str) -> str:
        """
        Guess the delimiter from the first non-blank lines.

        The candidate giving the most consistent field count (more than
        one field) wins; ties go to the earlier candidate.
        """
        lines = [line for line in text.splitlines() if line.strip()]
        sample = lines[:settings.DELIMITER_SNIFF_LINES]

        best = self.delimiters[0]
        best_score = (0.0, 0)

        for delimiter in self.delimiters:
            counts = [len(fields) for fields in csv.reader(sample, delimiter=delimiter)]
            if not counts:
                continue
            modal = max(set(counts), key=counts.count)
            if modal < 2:
                continue
            consistency = counts.count(modal) / len(counts)
            score = (consistency, modal)
            if score > best_score:
                best, best_score = delimiter, score

        logger.debug(f"Detected delimiter {best!r} (score={best_score})")
        return best

    def _resolve(self, source: str) -> Path:
        """Find source as given, then under data_root."""
        path = Path(source)
        if path.exists():
            return path

        fallback = self.data_root / source
        if fallback.exists():
            logger.debug(f"{source} not found, using {fallback}")
            return fallback

        raise FileNotFoundError(f"Review file not found: {source} (also tried {fallback})")


def load_reviews(source: str) -> LoadResult:
    """Load a delimited review file with default settings."""
    return TabularLoader().load(source)


# Design Notes:
#
# 1. Diagnostics never stop a load.
#    - TooManyFields rows are skipped
#    - TooFewFields rows are kept with missing cells as None
#    - InvalidEncoding replaces bad bytes with U+FFFD
#
# 2. Only two conditions raise: an empty source argument and a file
#    missing from both locations.
