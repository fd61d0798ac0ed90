"""Pull the game-record file out of a downloaded ZIP archive."""

from __future__ import annotations

import io
import zipfile
import zlib

from mastergames.errors import ArchiveFailure
from mastergames.extract_result import ExtractResult
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)


def extract_pgn_text(archive_bytes: bytes, *, suffix: str = ".pgn") -> ExtractResult:
    """Return the text of the first archive entry ending in ``suffix``.

    Invalid UTF-8 sequences are replaced rather than rejected; older player
    archives mix Latin-1 names into otherwise UTF-8 files.

    Args:
        archive_bytes: Raw ZIP payload.
        suffix: Case-insensitive entry name suffix to look for.

    Returns:
        Extract result holding the decoded text or an ``ArchiveFailure``.
    """

    try:
        with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
            entry = _find_entry(archive, suffix)
            if entry is None:
                return _failed(f"No {suffix} file found in archive")
            logger.info("Extracting: %s", entry.filename)
            raw = archive.read(entry)
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        OSError,
        EOFError,
        NotImplementedError,
        RuntimeError,
        zlib.error,
    ) as exc:
        return _failed(f"Extraction failed: {exc}")
    return ExtractResult(text=raw.decode("utf-8", errors="replace"), entry_name=entry.filename)


def _find_entry(archive: zipfile.ZipFile, suffix: str) -> zipfile.ZipInfo | None:
    wanted = suffix.lower()
    for info in archive.infolist():
        if info.is_dir():
            continue
        if info.filename.lower().endswith(wanted):
            return info
    return None


def _failed(message: str) -> ExtractResult:
    logger.error(message)
    return ExtractResult(failure=ArchiveFailure(message))
