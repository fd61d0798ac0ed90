from __future__ import annotations

import os
from dataclasses import MISSING, dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

_MISSING = object()

load_dotenv()

DEFAULT_DATA_DIR = Path(os.getenv("MASTERGAMES_DATA_DIR", "data/pgn-downloads"))
DEFAULT_OUTPUT_PATH = DEFAULT_DATA_DIR / "processed-games.json"
DEFAULT_ARCHIVE_BASE_URL = "https://www.pgnmentor.com/players"
DEFAULT_USER_AGENT = (
    "Fenster Chess Opening Explorer (https://fensterchess.com) - Educational research project"
)


def _read_optional_path(name: str) -> Path | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return Path(value)


def _field_value(name: str, field_info: object, kwargs: dict[str, object]) -> object:
    value = kwargs.pop(name, _MISSING)
    if value is not _MISSING:
        return value
    default_factory = getattr(field_info, "default_factory", MISSING)
    if default_factory is not MISSING:
        return default_factory()
    default = getattr(field_info, "default", MISSING)
    if default is not MISSING:
        return default
    raise TypeError(f"Missing required argument: {name}")


def _raise_on_unexpected_kwargs(kwargs: dict[str, object]) -> None:
    if kwargs:
        unexpected = next(iter(kwargs))
        raise TypeError(f"Settings.__init__() got an unexpected keyword argument '{unexpected}'")


@dataclass(slots=True, init=False)
# pylint: disable=too-many-instance-attributes
class Settings:
    """Central configuration for archive ingestion."""

    output_path: Path = Path(os.getenv("MASTERGAMES_OUTPUT_PATH", DEFAULT_OUTPUT_PATH))
    sources_path: Path | None = _read_optional_path("MASTERGAMES_SOURCES_PATH")
    archive_base_url: str = os.getenv("MASTERGAMES_ARCHIVE_BASE_URL", DEFAULT_ARCHIVE_BASE_URL)
    user_agent: str = os.getenv("MASTERGAMES_USER_AGENT", DEFAULT_USER_AGENT)
    record_suffix: str = os.getenv("MASTERGAMES_RECORD_SUFFIX", ".pgn")
    throttle_ms: int = int(os.getenv("MASTERGAMES_THROTTLE_MS", "10000"))
    workers: int = int(os.getenv("MASTERGAMES_WORKERS", "4"))
    batch_size: int = int(os.getenv("MASTERGAMES_BATCH_SIZE", "100"))
    request_timeout_s: float = float(os.getenv("MASTERGAMES_TIMEOUT_S", "60"))
    min_rating: int = int(os.getenv("MASTERGAMES_MIN_RATING", "2400"))
    download_attempts: int = int(os.getenv("MASTERGAMES_DOWNLOAD_ATTEMPTS", "1"))
    retry_backoff_ms: int = int(os.getenv("MASTERGAMES_RETRY_BACKOFF_MS", "1000"))
    progress_interval: int = int(os.getenv("MASTERGAMES_PROGRESS_INTERVAL", "1000"))
    resume: bool = os.getenv("MASTERGAMES_RESUME", "1") == "1"

    def __init__(self, **kwargs: object) -> None:
        for field_info in fields(self):
            name = field_info.name
            setattr(self, name, _field_value(name, field_info, kwargs))
        _raise_on_unexpected_kwargs(kwargs)

    @property
    def throttle_seconds(self) -> float:
        return max(self.throttle_ms, 0) / 1000.0

    def ensure_dirs(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)


def get_settings(**overrides: object) -> Settings:
    load_dotenv()
    settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
    settings.ensure_dirs()
    return settings
