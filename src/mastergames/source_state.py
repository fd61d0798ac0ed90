from enum import StrEnum


class SourceState(StrEnum):
    """Lifecycle of one source within a run."""

    IDLE = "idle"
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    ACCUMULATING = "accumulating"
    THROTTLING = "throttling"
    DONE = "done"
    SOURCE_FAILED = "source_failed"
