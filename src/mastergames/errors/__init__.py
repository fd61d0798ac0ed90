"""Custom error types used in mastergames."""

from __future__ import annotations


class IngestError(Exception):
    """Base class for ingestion failures."""


class TransportFailure(IngestError):
    """An archive download did not produce a usable payload."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ArchiveFailure(IngestError):
    """A downloaded archive could not be opened or held no game file."""


class RecordParseFailure(IngestError):
    """A single game record could not be parsed."""


class PersistenceFailure(IngestError):
    """The corpus could not be read from or written to disk."""


__all__ = [
    "ArchiveFailure",
    "IngestError",
    "PersistenceFailure",
    "RecordParseFailure",
    "TransportFailure",
]
