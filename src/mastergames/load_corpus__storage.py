"""Load a previously persisted corpus to resume from."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mastergames.deduplication_index import DeduplicationIndex
from mastergames.errors import PersistenceFailure
from mastergames.game_record import GameRecord
from mastergames.ingest_state import IngestState
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[GameRecord])
_INDEX_ADAPTER = TypeAdapter(dict[str, int])


def load_corpus(path: Path) -> IngestState | None:
    """Rebuild an accumulator from the corpus at ``path``.

    Returns:
        The loaded state, or ``None`` when no corpus exists yet.

    Raises:
        PersistenceFailure: When the file exists but cannot be read.
    """

    if not path.exists():
        return None
    logger.info("Loading existing corpus from %s", path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
        records = _RECORDS_ADAPTER.validate_python(document.get("games", []))
        entries = _INDEX_ADAPTER.validate_python(document.get("deduplicationIndex", {}))
        tracking = dict(document.get("sourceTracking", {}))
    except (OSError, json.JSONDecodeError, ValidationError, AttributeError, TypeError) as exc:
        raise PersistenceFailure(f"Failed to load corpus from {path}: {exc}") from exc
    logger.info("Loaded %s existing games", len(records))
    return IngestState(
        records=records,
        index=DeduplicationIndex(entries),
        source_tracking=tracking,
        next_index=_next_index(records),
    )


def _next_index(records: list[GameRecord]) -> int:
    if not records:
        return 0
    return max(record.index for record in records) + 1
