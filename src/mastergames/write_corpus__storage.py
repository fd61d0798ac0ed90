"""Persist the merged corpus as one JSON document."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from mastergames.errors import PersistenceFailure
from mastergames.ingest_result import IngestResult
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)


def build_corpus_document(result: IngestResult) -> dict[str, object]:
    """Return the JSON-ready document for ``result``."""

    return {
        "games": [record.model_dump(mode="json") for record in result.records],
        "deduplicationIndex": result.index.to_dict(),
        "sourceTracking": result.source_tracking,
        "stats": result.stats.to_dict(),
    }


def write_corpus(path: Path, result: IngestResult) -> Path:
    """Write ``result`` to ``path`` atomically.

    The document is written to a temporary file in the target directory and
    renamed over ``path``, so readers never see a half-written corpus.

    Args:
        path: Destination file.
        result: Run output to persist.

    Returns:
        The written path.

    Raises:
        PersistenceFailure: When the document cannot be serialized or written.
    """

    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        document = build_corpus_document(result)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            json.dump(document, handle, indent=2)
        os.replace(tmp_name, path)
    except (OSError, TypeError, ValueError) as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise PersistenceFailure(f"Failed to write corpus to {path}: {exc}") from exc
    logger.info("Saved %s games to: %s", len(result.records), path)
    return path
