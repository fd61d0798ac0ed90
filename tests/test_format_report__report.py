from __future__ import annotations

from mastergames.deduplication_index import DeduplicationIndex
from mastergames.format_report__report import format_report
from mastergames.ingest_result import IngestResult
from mastergames.run_statistics import RunStatistics
from mastergames.source_report import SourceReport
from mastergames.source_state import SourceState


def _result() -> IngestResult:
    done = SourceReport(
        label="Carlsen",
        archive_name="Carlsen.zip",
        url="https://www.pgnmentor.com/players/Carlsen.zip",
        state=SourceState.DONE,
        stats=RunStatistics(total=8, accepted=6, rejected=1, duplicates=1),
    )
    failed = SourceReport(
        label="Kasparov",
        archive_name="Kasparov.zip",
        url="https://www.pgnmentor.com/players/Kasparov.zip",
        state=SourceState.SOURCE_FAILED,
        failure="TransportFailure: HTTP 503: Service Unavailable",
    )
    return IngestResult(
        records=[],
        index=DeduplicationIndex(),
        stats=RunStatistics(total=8, accepted=6, rejected=1, duplicates=1),
        reports=[done, failed],
    )


def test_report_lists_totals() -> None:
    report = format_report(_result())

    assert "Final Statistics" in report
    assert "Total games found: 8" in report
    assert "Accepted: 6" in report
    assert "Rejected: 1 (12.5%)" in report
    assert "Duplicates: 1" in report
    assert "Unique games indexed: 0" in report


def test_report_flags_skipped_sources() -> None:
    report = format_report(_result())

    assert "Carlsen (Carlsen.zip): total 8, accepted 6, rejected 1, duplicates 1" in report
    assert (
        "[SKIPPED] Kasparov (Kasparov.zip): TransportFailure: HTTP 503: Service Unavailable"
        in report
    )
    assert "Skipped sources (1), re-run these later:" in report
    assert "  - Kasparov: https://www.pgnmentor.com/players/Kasparov.zip" in report


def test_report_without_failures_has_no_skip_section() -> None:
    result = _result()
    result.reports.pop()

    assert "Skipped sources" not in format_report(result)


def test_statistics_helpers() -> None:
    stats = RunStatistics()
    assert stats.rejection_rate == 0.0
    stats.record_accepted()
    stats.record_rejected()
    stats.record_duplicate()
    other = RunStatistics(total=1, accepted=1)

    stats.merge(other)

    assert stats.to_dict() == {"total": 4, "accepted": 2, "rejected": 1, "duplicates": 1}
    assert stats.is_consistent
    assert stats.rejection_rate == 0.25
