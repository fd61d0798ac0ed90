"""Human-readable end-of-run summary."""

from __future__ import annotations

from mastergames.ingest_result import IngestResult
from mastergames.run_statistics import RunStatistics
from mastergames.source_report import SourceReport

_RULE = "=" * 50


def _format_stats(stats: RunStatistics) -> str:
    return (
        f"total {stats.total}, accepted {stats.accepted}, "
        f"rejected {stats.rejected}, duplicates {stats.duplicates}"
    )


def _format_source(report: SourceReport) -> str:
    if report.skipped:
        return f"  [SKIPPED] {report.label} ({report.archive_name}): {report.failure}"
    return f"  {report.label} ({report.archive_name}): {_format_stats(report.stats)}"


def format_report(result: IngestResult) -> str:
    """Render per-source and aggregate counts, flagging skipped sources."""

    stats = result.stats
    lines = [_RULE, "Final Statistics", _RULE, "Sources:"]
    lines.extend(_format_source(report) for report in result.reports)
    skipped = result.skipped_sources
    if skipped:
        lines.append(f"Skipped sources ({len(skipped)}), re-run these later:")
        lines.extend(f"  - {report.label}: {report.url}" for report in skipped)
    lines.extend(
        [
            f"Total games found: {stats.total}",
            f"Accepted: {stats.accepted}",
            f"Rejected: {stats.rejected} ({stats.rejection_rate * 100:.1f}%)",
            f"Duplicates: {stats.duplicates}",
            f"Unique games indexed: {len(result.records)}",
            _RULE,
        ]
    )
    return "\n".join(lines)
