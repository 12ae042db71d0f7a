"""
Loader result model.

Rows parsed from a delimited source plus non-fatal parse diagnostics.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.models.review import RawRow


@dataclass
class ParseIssue:
    """A malformed-row diagnostic reported by the loader."""
    code: str  # "TooManyFields" or "TooFewFields"
    message: str
    row: Optional[int] = None  # 0-based data row index, when known

    def __str__(self) -> str:
        location = f" (row {self.row})" if self.row is not None else ""
        return f"{self.code}: {self.message}{location}"


@dataclass
class LoadResult:
    """
    Output of the tabular loader.
    meta holds "delimiter", "fields" and "source".
    """
    data: List[RawRow] = field(default_factory=list)
    errors: List[ParseIssue] = field(default_factory=list)
    meta: Dict = field(default_factory=dict)
