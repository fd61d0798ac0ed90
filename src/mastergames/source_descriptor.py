"""Remote archive descriptors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceDescriptor(BaseModel):
    """One remote archive to ingest.

    Attributes:
        label: Human-readable name used in logs and reports.
        archive_name: File name of the archive; also the tracking key.
        url: Explicit archive URL. When omitted the archive name is appended
            to the configured base URL.
        source_tag: Corpus tag stored on every game from this archive.
        require_titles: Only accept games between titled players.

    Example:
        >>> SourceDescriptor(label="Carlsen", archive_name="Carlsen.zip")
    """

    model_config = ConfigDict(frozen=True)

    label: str
    archive_name: str
    url: str | None = None
    source_tag: str = "pgnmentor"
    require_titles: bool = False

    def resolve_url(self, base_url: str) -> str:
        if self.url:
            return self.url
        return f"{base_url.rstrip('/')}/{self.archive_name}"
