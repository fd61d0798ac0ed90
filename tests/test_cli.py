from __future__ import annotations

from unittest.mock import patch

from mastergames.cli import build_parser, main
from mastergames.deduplication_index import DeduplicationIndex
from mastergames.errors import PersistenceFailure
from mastergames.ingest_result import IngestResult
from mastergames.run_statistics import RunStatistics
from tests.ingest_fakes import make_settings


def _empty_result() -> IngestResult:
    return IngestResult(
        records=[],
        index=DeduplicationIndex(),
        stats=RunStatistics(total=2, accepted=1, rejected=1),
    )


def test_parser_flags() -> None:
    args = build_parser().parse_args(
        ["--throttle-ms", "500", "--workers", "2", "--batch-size", "10", "--fresh", "-v"]
    )

    assert args.throttle_ms == 500
    assert args.workers == 2
    assert args.batch_size == 10
    assert args.fresh
    assert args.verbose
    assert args.sources is None


def test_main_runs_pipeline_and_prints_report(tmp_path, capsys) -> None:
    settings = make_settings(tmp_path)
    with (
        patch("mastergames.cli.get_settings", return_value=settings) as get_settings,
        patch("mastergames.cli.ingest_and_persist", return_value=_empty_result()) as ingest,
    ):
        exit_code = main(["--throttle-ms", "100", "--fresh"])

    assert exit_code == 0
    overrides = get_settings.call_args.kwargs
    assert overrides["throttle_ms"] == 100
    assert overrides["resume"] is False
    assert overrides["workers"] is None
    sources, passed_settings = ingest.call_args.args
    assert len(sources) == 6
    assert passed_settings is settings
    out = capsys.readouterr().out
    assert "Total games found: 2" in out
    assert f"Saved to: {settings.output_path}" in out


def test_main_returns_one_on_persistence_failure(tmp_path) -> None:
    with (
        patch("mastergames.cli.get_settings", return_value=make_settings(tmp_path)),
        patch(
            "mastergames.cli.ingest_and_persist",
            side_effect=PersistenceFailure("disk full"),
        ),
    ):
        assert main([]) == 1


def test_main_returns_two_on_bad_sources_file(tmp_path) -> None:
    sources_path = tmp_path / "sources.json"
    sources_path.write_text("not json", encoding="utf-8")
    settings = make_settings(tmp_path, sources_path=sources_path)
    with (
        patch("mastergames.cli.get_settings", return_value=settings),
        patch("mastergames.cli.ingest_and_persist") as ingest,
    ):
        assert main(["--sources", str(sources_path)]) == 2
    ingest.assert_not_called()
