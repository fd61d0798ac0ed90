"""Parallel, order-preserving PGN header parser."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from concurrent.futures import Executor, Future, ProcessPoolExecutor

from mastergames.game_boundary import GameBoundary
from mastergames.parse_header_batch__parser import parse_header_batch
from mastergames.split_game_ranges__parser import iter_batches

ExecutorFactory = Callable[..., Executor]


def parse_games(
    text: str,
    *,
    workers: int = 4,
    batch_size: int = 100,
    executor_factory: ExecutorFactory = ProcessPoolExecutor,
) -> Iterator[GameBoundary]:
    """Yield a ``GameBoundary`` per record of ``text`` in document order.

    Batches of ``batch_size`` records are handed to a pool of ``workers``.
    At most ``2 * workers`` batches are in flight, and finished batches are
    released strictly in submission order, so completion order never shows
    in the output. ``workers <= 1`` parses inline.

    Args:
        text: Concatenated PGN text.
        workers: Pool size.
        batch_size: Records per dispatched batch.
        executor_factory: Callable accepting ``max_workers`` and returning an
            executor.

    Yields:
        Boundaries in the order their records appear in ``text``.
    """

    batches = iter_batches(text, batch_size)
    if workers <= 1:
        for batch in batches:
            yield from parse_header_batch(batch)
        return

    max_in_flight = workers * 2
    pending: deque[Future[list[GameBoundary]]] = deque()
    with executor_factory(max_workers=workers) as executor:
        try:
            for batch in batches:
                pending.append(executor.submit(parse_header_batch, batch))
                if len(pending) >= max_in_flight:
                    yield from pending.popleft().result()
            while pending:
                yield from pending.popleft().result()
        finally:
            for future in pending:
                future.cancel()
