"""Return value of an ingestion run."""

from __future__ import annotations

from dataclasses import dataclass, field

from mastergames.deduplication_index import DeduplicationIndex
from mastergames.game_record import GameRecord
from mastergames.run_statistics import RunStatistics
from mastergames.source_report import SourceReport


@dataclass(slots=True)
class IngestResult:
    """Corpus, index, and statistics produced by ``run_ingest``.

    ``stats`` aggregates only the sources processed in this run; ``records``
    also holds any games carried over from a resumed corpus.
    """

    records: list[GameRecord]
    index: DeduplicationIndex
    stats: RunStatistics
    reports: list[SourceReport] = field(default_factory=list)
    source_tracking: dict[str, dict[str, object]] = field(default_factory=dict)

    @property
    def skipped_sources(self) -> list[SourceReport]:
        return [report for report in self.reports if report.skipped]
