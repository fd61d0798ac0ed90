"""Drive every source through download, extraction, parsing, and accumulation."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from functools import partial

import requests

from mastergames.classify_game__classifier import Classifier, build_classifier
from mastergames.config import Settings
from mastergames.extract_pgn_text__extractor import extract_pgn_text
from mastergames.fetch_archive__retriever import fetch_archive
from mastergames.fetch_with_retries__retriever import Fetcher, fetch_with_retries
from mastergames.fingerprint_game__dedup import Fingerprinter, fingerprint_game
from mastergames.ingest_result import IngestResult
from mastergames.ingest_state import IngestState
from mastergames.parse_games__parser import ExecutorFactory, parse_games
from mastergames.process_source_games__pipeline import SourceGamesContext, process_source_games
from mastergames.run_statistics import RunStatistics
from mastergames.source_descriptor import SourceDescriptor
from mastergames.source_report import SourceReport
from mastergames.source_state import SourceState
from mastergames.utils.hasher import Hasher
from mastergames.utils.logger import get_logger
from mastergames.utils.now import Now

logger = get_logger(__name__)


@dataclass(slots=True)
class IngestHooks:
    """Collaborators of a run that tests and callers may replace.

    Attributes:
        fetch: Single-attempt archive fetcher taking a URL. Defaults to the
            HTTP retriever bound to the run's settings.
        classifier: Import policy applied to every source. Defaults to the
            rating/variant policy with each source's title requirement.
        fingerprint: Header fingerprint function.
        sleep: Blocking sleep used for the politeness delay.
        executor_factory: Worker pool factory for header parsing.
    """

    fetch: Fetcher | None = None
    classifier: Classifier | None = None
    fingerprint: Fingerprinter = fingerprint_game
    sleep: Callable[[float], None] = time.sleep
    executor_factory: ExecutorFactory = ProcessPoolExecutor


def run_ingest(
    sources: Sequence[SourceDescriptor],
    settings: Settings,
    *,
    hooks: IngestHooks | None = None,
    seed: IngestState | None = None,
) -> IngestResult:
    """Process ``sources`` one at a time and return the merged corpus.

    Sources are never downloaded concurrently. A fixed politeness delay is
    awaited between consecutive source attempts, whether or not the previous
    source succeeded. Download and extraction failures skip the source with
    zero counts; nothing short of an unexpected error stops the loop.

    Args:
        sources: Archives to ingest, in order.
        settings: Run configuration.
        hooks: Replaceable collaborators.
        seed: Accumulator from a previous corpus to continue from.

    Returns:
        Records, dedup index, aggregate statistics, and per-source reports.
    """

    hooks = hooks or IngestHooks()
    state = seed if seed is not None else IngestState()
    aggregate = RunStatistics()
    reports: list[SourceReport] = []
    logger.info(
        "Ingesting %s sources; throttle %.1fs between downloads; User-Agent: %s",
        len(sources),
        settings.throttle_seconds,
        settings.user_agent,
    )
    with _resolve_fetcher(hooks, settings) as fetch:
        for position, source in enumerate(sources):
            if position:
                logger.debug("Run state: %s", SourceState.THROTTLING)
                logger.info("Waiting %.1f seconds...", settings.throttle_seconds)
                hooks.sleep(settings.throttle_seconds)
            logger.info("[%s/%s] Processing: %s", position + 1, len(sources), source.label)
            report = _ingest_source(source, settings, hooks, fetch, state)
            aggregate.merge(report.stats)
            reports.append(report)
    return IngestResult(
        records=state.records,
        index=state.index,
        stats=aggregate,
        reports=reports,
        source_tracking=state.source_tracking,
    )


@contextmanager
def _resolve_fetcher(hooks: IngestHooks, settings: Settings) -> Iterator[Fetcher]:
    if hooks.fetch is not None:
        yield hooks.fetch
        return
    with requests.Session() as session:
        yield partial(
            fetch_archive,
            user_agent=settings.user_agent,
            timeout_s=settings.request_timeout_s,
            session=session,
        )


def _transition(report: SourceReport, new_state: SourceState) -> None:
    logger.debug("%s: %s -> %s", report.label, report.state, new_state)
    report.state = new_state


def _ingest_source(
    source: SourceDescriptor,
    settings: Settings,
    hooks: IngestHooks,
    fetch: Fetcher,
    state: IngestState,
) -> SourceReport:
    url = source.resolve_url(settings.archive_base_url)
    report = SourceReport(label=source.label, archive_name=source.archive_name, url=url)

    _transition(report, SourceState.DOWNLOADING)
    fetched = fetch_with_retries(
        fetch,
        url,
        attempts=settings.download_attempts,
        backoff_ms=settings.retry_backoff_ms,
    )
    if not fetched.ok:
        return _skip(report, f"TransportFailure: {fetched.failure}", "download")
    payload = fetched.payload or b""
    report.archive_size = len(payload)

    _transition(report, SourceState.EXTRACTING)
    extracted = extract_pgn_text(payload, suffix=settings.record_suffix)
    if not extracted.ok:
        return _skip(report, f"ArchiveFailure: {extracted.failure}", "extraction")

    _transition(report, SourceState.PARSING)
    context = SourceGamesContext(
        text=extracted.text or "",
        source=source,
        classifier=hooks.classifier
        or build_classifier(min_rating=settings.min_rating, require_titles=source.require_titles),
        fingerprint=hooks.fingerprint,
        progress_interval=settings.progress_interval,
    )
    boundaries = parse_games(
        context.text,
        workers=settings.workers,
        batch_size=settings.batch_size,
        executor_factory=hooks.executor_factory,
    )
    _transition(report, SourceState.ACCUMULATING)
    report.stats = process_source_games(boundaries, context, state)

    state.source_tracking[source.archive_name] = {
        "url": url,
        "last_checked": Now.as_iso(),
        "size": report.archive_size,
        "sha256": Hasher.hash_bytes(payload),
        "game_count": report.stats.accepted,
    }
    _transition(report, SourceState.DONE)
    logger.info(
        "%s: accepted %s, rejected %s, duplicates %s",
        source.label,
        report.stats.accepted,
        report.stats.rejected,
        report.stats.duplicates,
    )
    return report


def _skip(report: SourceReport, failure: str, stage: str) -> SourceReport:
    report.failure = failure
    _transition(report, SourceState.SOURCE_FAILED)
    logger.warning("Skipping %s due to %s failure: %s", report.label, stage, failure)
    return report
