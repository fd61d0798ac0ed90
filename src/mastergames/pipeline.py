"""Top-level ingestion entry points."""

from __future__ import annotations

from collections.abc import Sequence

from mastergames.config import Settings
from mastergames.ingest_result import IngestResult
from mastergames.load_corpus__storage import load_corpus
from mastergames.run_ingest__pipeline import IngestHooks, run_ingest
from mastergames.source_descriptor import SourceDescriptor
from mastergames.utils.logger import get_logger
from mastergames.write_corpus__storage import write_corpus

logger = get_logger(__name__)


def ingest_and_persist(
    sources: Sequence[SourceDescriptor],
    settings: Settings,
    *,
    hooks: IngestHooks | None = None,
) -> IngestResult:
    """Run the pipeline over ``sources`` and write the corpus once at the end.

    With ``settings.resume`` the existing corpus at ``settings.output_path``
    seeds the records and the dedup index, so replayed games count as
    duplicates.

    Raises:
        PersistenceFailure: When the existing corpus cannot be loaded or the
            new one cannot be written.
    """

    seed = load_corpus(settings.output_path) if settings.resume else None
    result = run_ingest(sources, settings, hooks=hooks, seed=seed)
    write_corpus(settings.output_path, result)
    return result


__all__ = ["IngestHooks", "ingest_and_persist", "run_ingest"]
