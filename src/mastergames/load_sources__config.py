"""Load archive descriptors from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mastergames.DEFAULT_SOURCES import DEFAULT_SOURCES
from mastergames.source_descriptor import SourceDescriptor

_SOURCES_ADAPTER = TypeAdapter(list[SourceDescriptor])


def load_sources(path: Path | None) -> list[SourceDescriptor]:
    """Return the configured source list.

    Args:
        path: JSON file holding a list of descriptor objects, or ``None`` for
            the built-in archive list.

    Returns:
        Source descriptors in processing order.

    Raises:
        ValueError: When the file is not valid JSON or fails validation.
    """

    if path is None:
        return list(DEFAULT_SOURCES)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return _SOURCES_ADAPTER.validate_python(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ValueError(f"Invalid sources file {path}: {exc}") from exc
