"""Classify, deduplicate, and accumulate the games of one source."""

from __future__ import annotations

# pylint: disable=broad-exception-caught
from collections.abc import Iterable
from dataclasses import dataclass

from mastergames.build_game_record__pipeline import build_game_record
from mastergames.classify_game__classifier import Classifier
from mastergames.extract_moves__moves import extract_moves
from mastergames.fingerprint_game__dedup import Fingerprinter
from mastergames.game_boundary import GameBoundary
from mastergames.ingest_state import IngestState
from mastergames.run_statistics import RunStatistics
from mastergames.source_descriptor import SourceDescriptor
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SourceGamesContext:
    """Inputs shared by every record of one source."""

    text: str
    source: SourceDescriptor
    classifier: Classifier
    fingerprint: Fingerprinter
    progress_interval: int = 0


def process_source_games(
    boundaries: Iterable[GameBoundary],
    context: SourceGamesContext,
    state: IngestState,
) -> RunStatistics:
    """Fold parsed boundaries into ``state`` and return this source's counters.

    Each record resolves to exactly one of accepted, rejected, or duplicate.
    Classification runs before fingerprinting, and moves are only sliced for
    games that are both accepted and new.
    """

    stats = RunStatistics()
    for boundary in boundaries:
        _accumulate(boundary, context, state, stats)
        if context.progress_interval and stats.total % context.progress_interval == 0:
            logger.info("Processing: %s games...", stats.total)
    logger.info("Processing: %s games complete", stats.total)
    return stats


def _accumulate(
    boundary: GameBoundary,
    context: SourceGamesContext,
    state: IngestState,
    stats: RunStatistics,
) -> None:
    if boundary.is_malformed:
        logger.debug(
            "Rejecting malformed record at offset %s in %s: %s",
            boundary.start_offset,
            context.source.archive_name,
            boundary.error,
        )
        stats.record_rejected()
        return
    headers = boundary.headers
    try:
        if not context.classifier(headers):
            stats.record_rejected()
            return
        fingerprint = context.fingerprint(headers)
        if fingerprint in state.index:
            _log_duplicate(boundary, context, state.index.get(fingerprint))
            stats.record_duplicate()
            return
        record = build_game_record(
            headers,
            extract_moves(context.text, boundary),
            index=state.next_index,
            fingerprint=fingerprint,
            source=context.source,
        )
    except Exception as exc:
        logger.warning(
            "Rejecting record at offset %s in %s: %s",
            boundary.start_offset,
            context.source.archive_name,
            exc,
        )
        stats.record_rejected()
        return
    if not state.index.check_and_insert(fingerprint, record.index):
        _log_duplicate(boundary, context, state.index.get(fingerprint))
        stats.record_duplicate()
        return
    state.append(record)
    stats.record_accepted()


def _log_duplicate(boundary: GameBoundary, context: SourceGamesContext, first: int | None) -> None:
    logger.debug(
        "Duplicate at offset %s in %s of game #%s",
        boundary.start_offset,
        context.source.archive_name,
        first,
    )
