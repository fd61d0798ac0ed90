"""Outcome of opening a downloaded archive."""

from __future__ import annotations

from dataclasses import dataclass

from mastergames.errors import ArchiveFailure


@dataclass(frozen=True, slots=True)
class ExtractResult:
    """Either the contained PGN text or the reason there is none.

    Attributes:
        text: Decoded game-record text on success.
        entry_name: Name of the archive entry that was read.
        failure: Archive failure on error.
    """

    text: str | None = None
    entry_name: str | None = None
    failure: ArchiveFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.text is not None
