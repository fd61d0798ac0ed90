"""Command-line entry point for a full ingestion run."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mastergames.config import get_settings
from mastergames.errors import PersistenceFailure
from mastergames.format_report__report import format_report
from mastergames.load_sources__config import load_sources
from mastergames.pipeline import ingest_and_persist
from mastergames.utils.logger import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastergames",
        description="Download master-game archives and build a deduplicated game corpus.",
    )
    parser.add_argument("--sources", type=Path, help="JSON file listing source archives")
    parser.add_argument("--output", type=Path, help="Corpus output path")
    parser.add_argument("--throttle-ms", type=int, help="Delay between source downloads")
    parser.add_argument("--workers", type=int, help="Header parsing worker count")
    parser.add_argument("--batch-size", type=int, help="Records per parsing batch")
    parser.add_argument("--min-rating", type=int, help="Exclusive rating floor for both players")
    parser.add_argument(
        "--fresh", action="store_true", help="Ignore any existing corpus and start from zero"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline and print the report.

    Returns:
        0 on success, 1 when the corpus could not be persisted, 2 on bad input.
    """

    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    settings = get_settings(
        sources_path=args.sources,
        output_path=args.output,
        throttle_ms=args.throttle_ms,
        workers=args.workers,
        batch_size=args.batch_size,
        min_rating=args.min_rating,
        resume=False if args.fresh else None,
    )
    try:
        sources = load_sources(settings.sources_path)
    except (OSError, ValueError) as exc:
        logger.error("Could not load sources: %s", exc)
        return 2
    try:
        result = ingest_and_persist(sources, settings)
    except PersistenceFailure as exc:
        logger.error("Failed: %s", exc)
        return 1
    print(format_report(result))
    print(f"Saved to: {settings.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
