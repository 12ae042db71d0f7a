"""
Pipeline Orchestrator.

Runs the batch pipeline end to end in a single call stack:
Loader → Normalizer → Aggregator (app, language) → Statistics.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.agents.aggregation import SentimentAggregator
from src.agents.loader import TabularLoader
from src.agents.normalization import RecordNormalizer
from src.agents.statistics import SummaryStatisticsEngine
from src.models.load_result import LoadResult, ParseIssue
from src.models.review import Review
from src.models.summary import (
    AppSentimentSummary,
    LanguageSentimentSummary,
    SummaryStatistics,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything produced by one pipeline run."""
    reviews: List[Review]
    by_app: List[AppSentimentSummary]
    by_language: List[LanguageSentimentSummary]
    summary: SummaryStatistics
    parse_errors: List[ParseIssue] = field(default_factory=list)
    rows_loaded: int = 0

    @property
    def rows_dropped(self) -> int:
        return self.rows_loaded - len(self.reviews)

    def to_dict(self) -> Dict:
        """JSON-friendly report (reviews themselves are omitted)."""
        summary = self.summary.to_dict()
        if not math.isfinite(summary["avgRating"]):
            summary["avgRating"] = None

        return {
            "rows_loaded": self.rows_loaded,
            "reviews_kept": len(self.reviews),
            "rows_dropped": self.rows_dropped,
            "parse_errors": [str(e) for e in self.parse_errors],
            "by_app": [s.to_dict() for s in self.by_app],
            "by_language": [s.to_dict() for s in self.by_language],
            "summary": summary,
        }


class PipelineOrchestrator:
    """
    Coordinates the pipeline stages.

    Each stage consumes the previous stage's full output.
    """

    def __init__(
        self,
        loader: Optional[TabularLoader] = None,
        normalizer: Optional[RecordNormalizer] = None,
        aggregator: Optional[SentimentAggregator] = None,
        statistics: Optional[SummaryStatisticsEngine] = None
    ):
        self.loader = loader or TabularLoader()
        self.normalizer = normalizer or RecordNormalizer()
        self.aggregator = aggregator or SentimentAggregator()
        self.statistics = statistics or SummaryStatisticsEngine()

    def run(self, source: str) -> PipelineResult:
        """
        Run the pipeline on a delimited file.

        Args:
            source: Path to the review export

        Returns:
            PipelineResult with reviews, aggregates and summary
        """
        logger.info(f"Starting pipeline for {source}")
        loaded = self.loader.load(source)
        return self.run_loaded(loaded)

    def run_loaded(self, loaded: LoadResult) -> PipelineResult:
        """Run the stages after loading."""
        # STAGE 1: Normalization
        reviews = self.normalizer.normalize(loaded)

        # STAGE 2: Sentiment aggregation (labels are cached on the reviews)
        by_app = self.aggregator.by_app(reviews)
        by_language = self.aggregator.by_language(reviews)

        # STAGE 3: Summary statistics
        summary = self.statistics.summarize(reviews)

        logger.info(
            f"Pipeline complete: {len(loaded.data)} rows → {len(reviews)} reviews, "
            f"{len(by_app)} apps, {len(by_language)} languages"
        )

        return PipelineResult(
            reviews=reviews,
            by_app=by_app,
            by_language=by_language,
            summary=summary,
            parse_errors=list(loaded.errors),
            rows_loaded=len(loaded.data)
        )


# Design Notes:
#
# 1. Stages run once each, in order, on fully materialized lists.
#
# 2. rows_dropped counts normalizer drops only.
#    - Rows the loader skipped appear in parse_errors instead
