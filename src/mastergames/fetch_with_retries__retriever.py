"""Retry wrapper around the archive retriever."""

from __future__ import annotations

import logging
from collections.abc import Callable

from tenacity import (
    RetryCallState,
    Retrying,
    before_sleep_log,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from mastergames.fetch_result import FetchResult
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)

Fetcher = Callable[[str], FetchResult]


def _is_failed(result: FetchResult) -> bool:
    return not result.ok


def _last_result(retry_state: RetryCallState) -> FetchResult:
    return retry_state.outcome.result()


def fetch_with_retries(
    fetch: Fetcher,
    url: str,
    *,
    attempts: int,
    backoff_ms: int,
    sleep: Callable[[float], None] | None = None,
) -> FetchResult:
    """Call ``fetch`` until it succeeds or ``attempts`` are used up.

    Args:
        fetch: Single-attempt fetcher that never raises.
        url: Archive URL.
        attempts: Total number of attempts; values below 1 mean one attempt.
        backoff_ms: Base for the exponential wait between attempts.
        sleep: Sleep function used between attempts.

    Returns:
        The first successful result, or the last failed one.
    """

    base_seconds = max(backoff_ms, 0) / 1000.0
    retrying = Retrying(
        retry=retry_if_result(_is_failed),
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=base_seconds, min=base_seconds, max=60),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        retry_error_callback=_last_result,
    )
    if sleep is not None:
        retrying = retrying.copy(sleep=sleep)
    return retrying(fetch, url)
