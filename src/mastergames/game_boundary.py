"""Parser output describing one game's position in the source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameBoundary:
    """Header map and offsets for one game record.

    Attributes:
        headers: Parsed ``[Key "Value"]`` pairs, or ``None`` when the record
            has no readable header block.
        start_offset: Index of the first character of the record.
        end_offset: Index one past the last character of the record.
        error: Parse failure description for malformed records.
    """

    headers: dict[str, str] | None
    start_offset: int
    end_offset: int
    error: str | None = None

    @property
    def is_malformed(self) -> bool:
        return self.headers is None
