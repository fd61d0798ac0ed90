"""Outcome of a single archive download."""

from __future__ import annotations

from dataclasses import dataclass

from mastergames.errors import TransportFailure


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Either the downloaded payload or the reason there is none.

    Attributes:
        url: Requested URL.
        payload: Response body on success.
        failure: Transport failure on error.
    """

    url: str
    payload: bytes | None = None
    failure: TransportFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.payload is not None

    @classmethod
    def success(cls, url: str, payload: bytes) -> FetchResult:
        return cls(url=url, payload=payload)

    @classmethod
    def failed(cls, url: str, failure: TransportFailure) -> FetchResult:
        return cls(url=url, failure=failure)
