from __future__ import annotations

import unittest
from unittest.mock import patch

from mastergames.classify_game__classifier import build_classifier
from mastergames.fingerprint_game__dedup import fingerprint_game
from mastergames.game_boundary import GameBoundary
from mastergames.ingest_state import IngestState
from mastergames.process_source_games__pipeline import SourceGamesContext, process_source_games
from mastergames.source_descriptor import SourceDescriptor
from tests.pgn_builders import make_game

SOURCE = SourceDescriptor(label="Fischer", archive_name="Fischer.zip")


def _boundary(text: str, start: int, end: int, headers: dict | None) -> GameBoundary:
    return GameBoundary(headers, start, end, error=None if headers else "missing header block")


class ProcessSourceGamesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = make_game("Fischer, Robert James", "Spassky, Boris V.", moves="1. c4 e6")
        self.headers = {
            "Event": "World Championship",
            "White": "Fischer, Robert James",
            "Black": "Spassky, Boris V.",
            "WhiteElo": "2785",
            "BlackElo": "2660",
            "Date": "1972.07.23",
            "Round": "6",
            "Result": "1-0",
        }

    def _context(self, text: str, **kwargs) -> SourceGamesContext:
        options = {"classifier": build_classifier(), "fingerprint": fingerprint_game}
        options.update(kwargs)
        return SourceGamesContext(text=text, source=SOURCE, **options)

    def test_accepted_record_is_appended_and_indexed(self) -> None:
        state = IngestState()
        boundary = _boundary(self.game, 0, len(self.game), self.headers)

        stats = process_source_games([boundary], self._context(self.game), state)

        self.assertEqual(stats.accepted, 1)
        self.assertEqual(state.next_index, 1)
        record = state.records[0]
        self.assertEqual(record.index, 0)
        self.assertEqual(record.move_text, "1. c4 e6")
        self.assertEqual(record.ply_count, 2)
        self.assertEqual(state.index.get(fingerprint_game(self.headers)), 0)

    def test_malformed_boundary_is_rejected(self) -> None:
        state = IngestState()

        stats = process_source_games([_boundary("junk", 0, 4, None)], self._context("junk"), state)

        self.assertEqual(stats.to_dict(), {"total": 1, "accepted": 0, "rejected": 1, "duplicates": 0})
        self.assertEqual(state.records, [])

    def test_duplicate_leaves_state_untouched(self) -> None:
        state = IngestState()
        boundary = _boundary(self.game, 0, len(self.game), self.headers)

        stats = process_source_games([boundary, boundary], self._context(self.game), state)

        self.assertEqual(stats.accepted, 1)
        self.assertEqual(stats.duplicates, 1)
        self.assertEqual(len(state.records), 1)
        self.assertEqual(len(state.index), 1)

    def test_duplicate_is_logged_against_first_occurrence(self) -> None:
        state = IngestState()
        boundary = _boundary(self.game, 0, len(self.game), self.headers)

        with patch("mastergames.process_source_games__pipeline.logger") as logger:
            process_source_games([boundary, boundary], self._context(self.game), state)

        duplicate_calls = [
            call.args for call in logger.debug.call_args_list if call.args[0].startswith("Duplicate")
        ]
        self.assertEqual(duplicate_calls, [(duplicate_calls[0][0], 0, "Fischer.zip", 0)])

    def test_rejected_game_is_not_fingerprinted(self) -> None:
        state = IngestState()
        fingerprinted: list[dict] = []

        def fingerprint(headers):
            fingerprinted.append(headers)
            return fingerprint_game(headers)

        weak = {**self.headers, "WhiteElo": "1500"}
        boundary = _boundary(self.game, 0, len(self.game), weak)
        stats = process_source_games(
            [boundary], self._context(self.game, fingerprint=fingerprint), state
        )

        self.assertEqual(stats.rejected, 1)
        self.assertEqual(fingerprinted, [])
        self.assertEqual(len(state.index), 0)

    def test_fingerprint_error_rejects_only_that_record(self) -> None:
        state = IngestState()

        def fingerprint(headers):
            if headers["Round"] == "6":
                raise KeyError("Round")
            return fingerprint_game(headers)

        other = {**self.headers, "Round": "7"}
        boundaries = [
            _boundary(self.game, 0, len(self.game), self.headers),
            _boundary(self.game, 0, len(self.game), other),
        ]
        stats = process_source_games(
            boundaries, self._context(self.game, fingerprint=fingerprint), state
        )

        self.assertEqual(stats.rejected, 1)
        self.assertEqual(stats.accepted, 1)
        self.assertTrue(stats.is_consistent)
        self.assertEqual(state.records[0].index, 0)


def test_indices_continue_from_seeded_state() -> None:
    game = make_game()
    seed_headers = {"Event": "Old", "White": "A", "Black": "B", "Date": "1900.01.01", "Round": "1"}
    state = IngestState(next_index=41)
    state.index.check_and_insert(fingerprint_game(seed_headers), 40)
    headers = {"Event": "New", "White": "C", "Black": "D", "WhiteElo": "2500", "BlackElo": "2500"}
    context = SourceGamesContext(
        text=game, source=SOURCE, classifier=build_classifier(), fingerprint=fingerprint_game
    )

    process_source_games([GameBoundary(headers, 0, len(game))], context, state)

    assert state.records[0].index == 41
    assert state.next_index == 42
