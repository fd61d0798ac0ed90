from __future__ import annotations

from enum import StrEnum


class GameResult(StrEnum):
    """
    Enumeration of PGN game outcomes, valued by their result tokens.

    Attributes:
        WHITE_WIN: ``1-0``.
        BLACK_WIN: ``0-1``.
        DRAW: ``1/2-1/2``.
        UNKNOWN: ``*`` or any unrecognized token.
    """

    WHITE_WIN = "1-0"
    BLACK_WIN = "0-1"
    DRAW = "1/2-1/2"
    UNKNOWN = "*"

    @classmethod
    def from_str(cls, result_str: str | None) -> GameResult:
        token = (result_str or "").strip()
        try:
            return cls(token)
        except ValueError:
            return cls.UNKNOWN
