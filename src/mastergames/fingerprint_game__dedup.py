"""Header-only fingerprints for duplicate detection."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from mastergames.utils.hasher import Hasher
from mastergames.utils.normalize_string import normalize_string

Fingerprinter = Callable[[Mapping[str, str]], str]


def normalize_game_for_fingerprint(headers: Mapping[str, str]) -> str:
    """Return the canonical ``event|white|black|date|round`` string.

    Event and player names are case-folded and trimmed; date and round are
    only trimmed. Move text never takes part, so the fingerprint is known
    before any move slicing happens.
    """

    event = normalize_string(headers.get("Event"))
    white = normalize_string(headers.get("White"))
    black = normalize_string(headers.get("Black"))
    date = (headers.get("Date") or "").strip()
    round_ = (headers.get("Round") or "").strip()
    return f"{event}|{white}|{black}|{date}|{round_}"


def fingerprint_game(headers: Mapping[str, str]) -> str:
    """SHA-256 hex digest of the canonical header string."""

    return Hasher.hash_string(normalize_game_for_fingerprint(headers))
