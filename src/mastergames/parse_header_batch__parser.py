"""Worker-side header parsing for one batch of game chunks."""

from __future__ import annotations

# pylint: disable=broad-exception-caught
from io import StringIO

import chess.pgn

from mastergames.game_boundary import GameBoundary
from mastergames.split_game_ranges__parser import GameChunk


def parse_header_batch(batch: list[GameChunk]) -> list[GameBoundary]:
    """Read the header map of every chunk in ``batch``.

    Runs inside pool workers, so it must stay a module-level function. A chunk
    that cannot be read becomes a boundary with ``headers=None``.
    """

    return [_parse_chunk(start, end, chunk) for start, end, chunk in batch]


def _parse_chunk(start: int, end: int, chunk: str) -> GameBoundary:
    try:
        headers = chess.pgn.read_headers(StringIO(chunk))
    except Exception as exc:
        return GameBoundary(None, start, end, error=f"{type(exc).__name__}: {exc}")
    if headers is None or not len(headers):
        return GameBoundary(None, start, end, error="missing header block")
    return GameBoundary(dict(headers), start, end)
