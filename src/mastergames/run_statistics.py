"""Per-source and aggregate counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RunStatistics:
    """Counters for one source or for a whole run.

    ``total`` only moves together with exactly one of the outcome counters, so
    ``total == accepted + rejected + duplicates`` holds after every update.
    """

    total: int = 0
    accepted: int = 0
    rejected: int = 0
    duplicates: int = 0

    def record_accepted(self) -> None:
        self.total += 1
        self.accepted += 1

    def record_rejected(self) -> None:
        self.total += 1
        self.rejected += 1

    def record_duplicate(self) -> None:
        self.total += 1
        self.duplicates += 1

    def merge(self, other: RunStatistics) -> None:
        self.total += other.total
        self.accepted += other.accepted
        self.rejected += other.rejected
        self.duplicates += other.duplicates

    @property
    def is_consistent(self) -> bool:
        return self.total == self.accepted + self.rejected + self.duplicates

    @property
    def rejection_rate(self) -> float:
        if not self.total:
            return 0.0
        return self.rejected / self.total

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "duplicates": self.duplicates,
        }
