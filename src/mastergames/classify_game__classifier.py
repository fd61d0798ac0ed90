"""Import policy for parsed game headers."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from mastergames.utils.to_int import to_int

Classifier = Callable[[Mapping[str, str]], bool]

DEFAULT_MIN_RATING = 2400
_STANDARD_VARIANTS = frozenset({"", "standard", "chess"})
_NON_PLAYER_TITLES = frozenset({"bot"})


def should_import_game(
    headers: Mapping[str, str],
    *,
    min_rating: int = DEFAULT_MIN_RATING,
    require_titles: bool = False,
) -> bool:
    """Decide whether a game belongs in the corpus.

    Rules:
        - standard chess only (no ``Variant`` other than Standard)
        - no ``FEN`` setup; games must start from the initial position
        - both ``WhiteElo`` and ``BlackElo`` strictly above ``min_rating``
        - with ``require_titles``, both players carry a title and neither is a bot

    Args:
        headers: PGN header map.
        min_rating: Exclusive rating floor for both players.
        require_titles: Require ``WhiteTitle`` and ``BlackTitle``.

    Returns:
        True when the game should be imported.
    """

    variant = (headers.get("Variant") or "").strip().lower()
    if variant not in _STANDARD_VARIANTS:
        return False
    if (headers.get("FEN") or "").strip():
        return False
    white_elo = to_int(headers.get("WhiteElo")) or 0
    black_elo = to_int(headers.get("BlackElo")) or 0
    if white_elo <= min_rating or black_elo <= min_rating:
        return False
    if require_titles:
        return _is_titled(headers.get("WhiteTitle")) and _is_titled(headers.get("BlackTitle"))
    return True


def build_classifier(
    *, min_rating: int = DEFAULT_MIN_RATING, require_titles: bool = False
) -> Classifier:
    """Bind policy options into a single-argument classifier."""

    def _classify(headers: Mapping[str, str]) -> bool:
        return should_import_game(headers, min_rating=min_rating, require_titles=require_titles)

    return _classify


def _is_titled(value: str | None) -> bool:
    title = (value or "").strip().lower()
    return bool(title) and title not in _NON_PLAYER_TITLES
