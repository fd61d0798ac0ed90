"""Per-source outcome of an ingestion run."""

from __future__ import annotations

from dataclasses import dataclass, field

from mastergames.run_statistics import RunStatistics
from mastergames.source_state import SourceState


@dataclass(slots=True)
class SourceReport:
    """What happened to one source.

    Attributes:
        label: Source label.
        archive_name: Archive file name.
        url: Resolved archive URL.
        state: Last state reached.
        stats: Counters for this source; all zero when it was skipped.
        failure: Failure description when the source was skipped.
        archive_size: Downloaded payload size in bytes.
    """

    label: str
    archive_name: str
    url: str
    state: SourceState = SourceState.IDLE
    stats: RunStatistics = field(default_factory=RunStatistics)
    failure: str | None = None
    archive_size: int = 0

    @property
    def skipped(self) -> bool:
        return self.state == SourceState.SOURCE_FAILED
