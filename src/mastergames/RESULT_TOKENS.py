"""PGN result markers that terminate a move block."""

# pylint: disable=invalid-name

from mastergames.game_result import GameResult

RESULT_TOKENS: frozenset[str] = frozenset(result.value for result in GameResult)
