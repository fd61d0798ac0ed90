"""mastergames package entrypoints."""

from mastergames.config import Settings, get_settings
from mastergames.deduplication_index import DeduplicationIndex
from mastergames.game_record import GameRecord
from mastergames.ingest_result import IngestResult
from mastergames.pipeline import ingest_and_persist
from mastergames.run_ingest__pipeline import IngestHooks, run_ingest
from mastergames.run_statistics import RunStatistics
from mastergames.source_descriptor import SourceDescriptor


def main() -> None:
    """Run a single end-to-end ingestion from the command line."""
    from mastergames.cli import main as cli_main  # noqa: PLC0415

    raise SystemExit(cli_main())


__all__ = [
    "DeduplicationIndex",
    "GameRecord",
    "IngestHooks",
    "IngestResult",
    "RunStatistics",
    "Settings",
    "SourceDescriptor",
    "get_settings",
    "ingest_and_persist",
    "main",
    "run_ingest",
]
