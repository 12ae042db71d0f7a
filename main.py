"""
Sentiment Pulse - App Review Sentiment Summary

CLI entry point for running the batch pipeline.
"""

import argparse
import json
import logging
import sys

import pandas as pd

from src.orchestrator import PipelineOrchestrator, PipelineResult
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)]  # stdout carries the report
    )


def render_text(result: PipelineResult) -> str:
    """Render the report as plain-text tables."""
    by_app = pd.DataFrame([s.to_dict() for s in result.by_app],
                          columns=["app_name", "positive", "neutral", "negative"])
    by_language = pd.DataFrame([s.to_dict() for s in result.by_language],
                               columns=["lang_name", "positive", "neutral", "negative"])
    summary = result.summary.to_dict()

    lines = [
        "=" * 60,
        f"Rows loaded: {result.rows_loaded}  "
        f"Reviews kept: {len(result.reviews)}  "
        f"Dropped: {result.rows_dropped}",
        "=" * 60,
        "",
        "Sentiment by app:",
        by_app.to_string(index=False),
        "",
        "Sentiment by language:",
        by_language.to_string(index=False),
        "",
        "Summary statistics:",
    ]
    lines.extend(f"  {key}: {value}" for key, value in summary.items())
    return "\n".join(lines)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sentiment Pulse - App review sentiment summary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize a CSV export
  python main.py multilingual_mobile_app_reviews_2025.csv

  # Emit JSON instead of tables
  python main.py reviews.tsv --format json
        """
    )

    parser.add_argument(
        "source",
        help=f"Delimited review file (relative names also tried under {settings.DATA_ROOT})"
    )

    parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        result = PipelineOrchestrator().run(args.source)

        if args.format == "json":
            print(json.dumps(result.to_dict(), indent=2, allow_nan=False))
        else:
            print(render_text(result))

        return 0

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        return 1

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
