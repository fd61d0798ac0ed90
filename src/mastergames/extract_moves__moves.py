"""Lazily recover move text and ply count for accepted games."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mastergames.game_boundary import GameBoundary
from mastergames.RESULT_TOKENS import RESULT_TOKENS

_HEADER_SPLIT_RE = re.compile(r"\r?\n[ \t]*\r?\n")
_HEADER_LINE_RE = re.compile(r"^\s*\[[^\]]*\]\s*$")
_COMMENT_RE = re.compile(r"\{[^}]*\}")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_VARIATION_RE = re.compile(r"\([^()]*\)")
_NAG_RE = re.compile(r"\$\d+")
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_WHITESPACE_RE = re.compile(r"\s+")
_SAN_RE = re.compile(
    r"^(?:O-O(?:-O)?|0-0(?:-0)?|[KQRBN]?[a-h]?[1-8]?x?[a-h][1-8](?:=?[QRBN])?)[+#]?[!?]*$"
)


@dataclass(frozen=True, slots=True)
class MoveText:
    move_text: str
    ply_count: int


def extract_moves(text: str, boundary: GameBoundary) -> MoveText:
    """Slice the move section of one record out of ``text``.

    The header block and the trailing result marker are dropped and
    whitespace is collapsed. Text with no recognisable moves yields a ply
    count of 0 rather than an error.
    """

    chunk = text[boundary.start_offset : boundary.end_offset]
    moves = _strip_result(_strip_headers(chunk))
    return MoveText(move_text=moves, ply_count=count_plies(moves))


def strip_annotations(move_text: str) -> str:
    """Remove comments, variations, and NAGs, then normalise whitespace."""

    clean = _COMMENT_RE.sub(" ", move_text)
    clean = _LINE_COMMENT_RE.sub(" ", clean)
    previous = None
    while previous != clean:
        previous = clean
        clean = _VARIATION_RE.sub(" ", clean)
    clean = _NAG_RE.sub(" ", clean)
    return _WHITESPACE_RE.sub(" ", clean).strip()


def count_plies(move_text: str) -> int:
    """Count half-moves in the main line of ``move_text``.

    Examples:
        >>> count_plies("1. e4 e5 2. Nf3")
        3
        >>> count_plies("1. e4 e5")
        2
    """

    plies = 0
    for token in strip_annotations(move_text).split(" "):
        if not token or token in RESULT_TOKENS:
            continue
        san = _MOVE_NUMBER_RE.sub("", token)
        if san and _SAN_RE.match(san):
            plies += 1
    return plies


def _strip_headers(chunk: str) -> str:
    parts = _HEADER_SPLIT_RE.split(chunk.strip(), maxsplit=1)
    if len(parts) == 2:
        return parts[1]
    lines = chunk.strip().splitlines()
    body = [line for line in lines if not _HEADER_LINE_RE.match(line)]
    return "\n".join(body)


def _strip_result(moves: str) -> str:
    collapsed = _WHITESPACE_RE.sub(" ", moves).strip()
    head, _, last = collapsed.rpartition(" ")
    if last in RESULT_TOKENS:
        return head
    return collapsed
