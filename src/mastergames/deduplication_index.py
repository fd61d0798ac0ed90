"""Fingerprint index shared across all sources of a run."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping


class DeduplicationIndex:
    """Insert-only mapping of fingerprint to the index of its first game.

    ``check_and_insert`` holds a lock across the membership test and the
    insert, so two callers can never both claim the same fingerprint.
    """

    def __init__(self, entries: Mapping[str, int] | None = None) -> None:
        self._entries: dict[str, int] = dict(entries or {})
        self._lock = threading.Lock()

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, fingerprint: str) -> int | None:
        return self._entries.get(fingerprint)

    def check_and_insert(self, fingerprint: str, index: int) -> bool:
        """Claim ``fingerprint`` for ``index``.

        Returns:
            True when this is the first occurrence, False for a duplicate.
        """

        with self._lock:
            if fingerprint in self._entries:
                return False
            self._entries[fingerprint] = index
            return True

    def to_dict(self) -> dict[str, int]:
        with self._lock:
            return dict(self._entries)


def check_and_insert(index: DeduplicationIndex, fingerprint: str, value: int) -> bool:
    """Functional form of :meth:`DeduplicationIndex.check_and_insert`."""

    return index.check_and_insert(fingerprint, value)
