"""Tests for ResultPipeline.write_reports and the full run."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from gradeflow.core.config import Settings
from gradeflow.core.exceptions import RecordValidationError, ReportWriteError
from gradeflow.schemas.errors import ErrorKind, ReportWriteReason
from gradeflow.services.pipeline import ResultPipeline


class TestWriteReports:
    def test_writes_both_reports(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        records = pipeline.ingest(sample_file)
        detail = tmp_path / "out" / "report.txt"
        summary = tmp_path / "out" / "summary.csv"

        report = pipeline.write_reports(records, detail, summary)

        assert report.records_written == 5
        assert report.detail_path == detail
        assert report.summary_path == summary
        assert report.statistics.average_score == Decimal("74.20")

        detail_lines = detail.read_text(encoding="utf-8").splitlines()
        assert detail_lines[0] == "StudentID,FullName,Score,Grade"
        assert detail_lines[1] == "3,Michael Johnson,91,A"
        assert len(detail_lines) == 6

        summary_text = summary.read_text(encoding="utf-8")
        assert summary_text.startswith("Grade,Count\nA,2\n")
        assert "\n\nTotal Students,5\n" in summary_text

    def test_creates_nested_directories(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        records = pipeline.ingest(sample_file)
        detail = tmp_path / "a" / "b" / "c" / "report.txt"
        summary = tmp_path / "x" / "summary.csv"
        pipeline.write_reports(records, detail, summary)
        assert detail.is_file()
        assert summary.is_file()

    def test_unix_line_endings(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        records = pipeline.ingest(sample_file)
        detail = tmp_path / "report.txt"
        pipeline.write_reports(records, detail, tmp_path / "summary.csv")
        assert b"\r\n" not in detail.read_bytes()

    def test_empty_records_rejected(self, pipeline: ResultPipeline, tmp_path: Path):
        with pytest.raises(ValueError):
            pipeline.write_reports([], tmp_path / "r.txt", tmp_path / "s.csv")


class TestWriteFailures:
    def test_location_unavailable(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        """A regular file where the output directory should be."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        records = pipeline.ingest(sample_file)

        with pytest.raises(ReportWriteError) as exc_info:
            pipeline.write_reports(
                records, blocker / "report.txt", tmp_path / "summary.csv"
            )
        exc = exc_info.value
        assert exc.kind == ErrorKind.REPORT_WRITE_FAILURE
        assert exc.reason == ReportWriteReason.LOCATION_UNAVAILABLE
        assert exc.path == blocker / "report.txt"

    def test_write_failed(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        """The output path itself is a directory, so it cannot be opened."""
        target = tmp_path / "summary.csv"
        target.mkdir()
        records = pipeline.ingest(sample_file)

        with pytest.raises(ReportWriteError) as exc_info:
            pipeline.write_reports(records, tmp_path / "report.txt", target)
        assert exc_info.value.reason == ReportWriteReason.WRITE_FAILED

    def test_records_survive_failure_and_retry(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        records = pipeline.ingest(sample_file)
        snapshot = list(records)

        with pytest.raises(ReportWriteError):
            pipeline.write_reports(records, blocker / "r.txt", blocker / "s.csv")

        assert records == snapshot
        report = pipeline.write_reports(
            records, tmp_path / "retry" / "r.txt", tmp_path / "retry" / "s.csv"
        )
        assert report.records_written == 5


class TestRun:
    def test_run_uses_configured_paths(
        self, test_settings: Settings, sample_file: Path
    ):
        report = ResultPipeline(test_settings).run(sample_file)
        assert report.detail_path == test_settings.detail_report_path
        assert report.summary_path == test_settings.summary_report_path
        assert test_settings.detail_report_path.is_file()
        assert test_settings.summary_report_path.is_file()

    def test_parse_failure_writes_nothing(
        self, test_settings: Settings, write_input
    ):
        path = write_input("1,John Smith,85\n1,John Again,70\n")
        with pytest.raises(RecordValidationError):
            ResultPipeline(test_settings).run(path)
        assert not test_settings.detail_report_path.exists()
        assert not test_settings.summary_report_path.exists()

    def test_rerun_is_byte_identical(
        self, pipeline: ResultPipeline, sample_file: Path, tmp_path: Path
    ):
        first = pipeline.run(sample_file, tmp_path / "1" / "r.txt", tmp_path / "1" / "s.csv")
        second = pipeline.run(sample_file, tmp_path / "2" / "r.txt", tmp_path / "2" / "s.csv")
        assert first.detail_path.read_bytes() == second.detail_path.read_bytes()
        assert first.summary_path.read_bytes() == second.summary_path.read_bytes()

    def test_half_even_setting(self, tmp_path: Path, write_input):
        scores = [100] * 7 + [97]
        path = write_input(
            "".join(f"{i},Student {i},{s}\n" for i, s in enumerate(scores, start=1))
        )
        settings = Settings(data_dir=tmp_path / "data", average_rounding="half_even")
        report = ResultPipeline(settings).run(path)
        assert report.summary_path.read_text().endswith("Average Score,99.62\n")
