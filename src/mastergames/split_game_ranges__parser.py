"""Split concatenated PGN text into per-game ranges and batches."""

from __future__ import annotations

from collections.abc import Iterator

from mastergames.GAME_END_RE import GAME_END_RE
from mastergames.GAME_START_RE import GAME_START_RE

GameRange = tuple[int, int]
GameChunk = tuple[int, int, str]


def find_game_ranges(text: str) -> list[GameRange]:
    """Return ``(start, end)`` offsets for every record in ``text``.

    A record starts at a header block or after a movetext line that ends in a
    result token and a blank line. Ranges are contiguous and in document
    order. Whitespace-only stretches are not records and are dropped; other
    text without a header block, such as a preamble or an orphaned move
    section, is kept as its own range so it surfaces as a malformed record.
    """

    if not text:
        return []
    starts = {0}
    starts.update(match.end() for match in GAME_START_RE.finditer(text))
    starts.update(match.end() for match in GAME_END_RE.finditer(text))
    bounds = [*sorted(starts), len(text)]
    ranges: list[GameRange] = []
    for start, end in zip(bounds, bounds[1:], strict=False):
        if start >= end or not text[start:end].strip():
            continue
        ranges.append((start, end))
    return ranges


def iter_batches(text: str, batch_size: int) -> Iterator[list[GameChunk]]:
    """Yield lists of at most ``batch_size`` chunks, preserving order."""

    size = max(batch_size, 1)
    batch: list[GameChunk] = []
    for start, end in find_game_ranges(text):
        batch.append((start, end, text[start:end]))
        if len(batch) >= size:
            yield batch
            batch = []
    if batch:
        yield batch
