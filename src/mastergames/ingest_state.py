"""Mutable accumulator carried across all sources of a run."""

from __future__ import annotations

from dataclasses import dataclass, field

from mastergames.deduplication_index import DeduplicationIndex
from mastergames.game_record import GameRecord


@dataclass(slots=True)
class IngestState:
    """Records, fingerprint index, and source tracking for one run.

    ``next_index`` is the index the next accepted game receives; it starts at
    ``len(records)`` so a resumed corpus continues without gaps.
    """

    records: list[GameRecord] = field(default_factory=list)
    index: DeduplicationIndex = field(default_factory=DeduplicationIndex)
    source_tracking: dict[str, dict[str, object]] = field(default_factory=dict)
    next_index: int = -1

    def __post_init__(self) -> None:
        if self.next_index < 0:
            self.next_index = len(self.records)

    def append(self, record: GameRecord) -> None:
        self.records.append(record)
        self.next_index = record.index + 1
