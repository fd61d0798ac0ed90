"""Assemble a corpus row from headers and lazily extracted moves."""

from __future__ import annotations

from collections.abc import Mapping

from mastergames.errors import RecordParseFailure
from mastergames.extract_moves__moves import MoveText
from mastergames.game_record import GameRecord
from mastergames.game_result import GameResult
from mastergames.source_descriptor import SourceDescriptor
from mastergames.utils.to_int import to_int


def _header(headers: Mapping[str, str], name: str, default: str) -> str:
    value = (headers.get(name) or "").strip()
    return value or default


def _optional_header(headers: Mapping[str, str], name: str) -> str | None:
    value = (headers.get(name) or "").strip()
    return value or None


def build_game_record(
    headers: Mapping[str, str] | None,
    moves: MoveText,
    *,
    index: int,
    fingerprint: str,
    source: SourceDescriptor,
) -> GameRecord:
    """Build a ``GameRecord``; missing headers fall back to placeholder values."""

    if headers is None:
        raise RecordParseFailure("Cannot build a record without headers")
    return GameRecord(
        index=index,
        white=_header(headers, "White", "Unknown"),
        black=_header(headers, "Black", "Unknown"),
        white_rating=to_int(headers.get("WhiteElo")),
        black_rating=to_int(headers.get("BlackElo")),
        result=GameResult.from_str(headers.get("Result")),
        date=_header(headers, "Date", "????.??.??"),
        event=_header(headers, "Event", "Unknown"),
        site=_header(headers, "Site", "?"),
        eco_code=_optional_header(headers, "ECO"),
        opening_name=_optional_header(headers, "Opening"),
        variation=_optional_header(headers, "Variation"),
        sub_variation=_optional_header(headers, "SubVariation"),
        move_text=moves.move_text,
        ply_count=moves.ply_count,
        source_tag=source.source_tag,
        source_file=source.archive_name,
        fingerprint=fingerprint,
    )
