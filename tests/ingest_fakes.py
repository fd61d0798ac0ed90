from __future__ import annotations

from pathlib import Path

from mastergames.config import Settings
from mastergames.errors import TransportFailure
from mastergames.fetch_result import FetchResult
from mastergames.source_descriptor import SourceDescriptor


def make_source(name: str, **kwargs) -> SourceDescriptor:
    return SourceDescriptor(
        label=name,
        archive_name=f"{name}.zip",
        url=f"https://archives.test/{name}.zip",
        **kwargs,
    )


def make_settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "output_path": tmp_path / "processed-games.json",
        "throttle_ms": 2500,
        "workers": 1,
        "batch_size": 3,
        "download_attempts": 1,
        "retry_backoff_ms": 0,
        "progress_interval": 0,
        "min_rating": 2400,
        "resume": True,
    }
    values.update(overrides)
    return Settings(**values)


class FakeArchiveServer:
    """Maps URLs to archive payloads; unknown URLs answer 404."""

    def __init__(self, payloads: dict[str, bytes] | None = None) -> None:
        self.payloads = dict(payloads or {})
        self.requested: list[str] = []

    def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url not in self.payloads:
            return FetchResult.failed(
                url, TransportFailure("HTTP 404: Not Found", url=url, status_code=404)
            )
        return FetchResult.success(url, self.payloads[url])
