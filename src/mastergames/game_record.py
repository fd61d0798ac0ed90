"""Corpus row model for accepted games."""

from pydantic import BaseModel, Field

from mastergames.game_result import GameResult


class GameRecord(BaseModel):
    """Represents one accepted, deduplicated game.

    Attributes:
        index: Global position in the corpus; unique and gap-free.
        white: White player name.
        black: Black player name.
        white_rating: White Elo, when present.
        black_rating: Black Elo, when present.
        result: Game outcome.
        date: PGN date string.
        event: Event name.
        site: Site name.
        eco_code: ECO code from the headers.
        opening_name: Opening name from the headers.
        variation: Variation name from the headers.
        sub_variation: Sub-variation name from the headers.
        move_text: Move section without headers or result marker.
        ply_count: Number of half-moves in the main line.
        source_tag: Corpus tag of the originating source.
        source_file: Archive name the game came from.
        fingerprint: Deduplication key.
    """

    index: int = Field(ge=0)
    white: str
    black: str
    white_rating: int | None = None
    black_rating: int | None = None
    result: GameResult = GameResult.UNKNOWN
    date: str
    event: str
    site: str
    eco_code: str | None = None
    opening_name: str | None = None
    variation: str | None = None
    sub_variation: str | None = None
    move_text: str
    ply_count: int = Field(default=0, ge=0)
    source_tag: str
    source_file: str
    fingerprint: str
