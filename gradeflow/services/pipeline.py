"""Student result pipeline: ingestion and report generation.

Two entry points:

* ``ingest(path)`` scans the input file line by line and returns the
  accepted records.  The first rejected line aborts the whole run; no
  partial result is ever returned.
* ``write_reports(records, detail_path, summary_path)`` writes the detail
  and summary artifacts.  A failure here never touches the records, so
  the caller can retry with other paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from gradeflow.core.config import Settings, settings as default_settings
from gradeflow.core.exceptions import (
    EmptyInputError,
    InputNotFoundError,
    RecordValidationError,
    ReportWriteError,
)
from gradeflow.core.logging import get_logger
from gradeflow.schemas.errors import ErrorKind, RecordError, ReportWriteReason
from gradeflow.schemas.report import GradingReport
from gradeflow.schemas.student import StudentRecord
from gradeflow.services.ingestion.record_parser import RecordParser
from gradeflow.services.reporting.formatter import (
    render_detail_report,
    render_summary_report,
)
from gradeflow.services.reporting.statistics import compute_summary

logger = get_logger(__name__)

PathLike = Union[str, Path]


class ResultPipeline:
    """Ingests a student records file and writes the two grade reports."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        parser: Optional[RecordParser] = None,
    ) -> None:
        self.config = config or default_settings
        self.parser = parser or RecordParser(delimiter=self.config.field_delimiter)

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest(self, path: PathLike) -> list[StudentRecord]:
        """Read and validate every line of ``path``.

        Raises:
            InputNotFoundError: The file does not exist.
            RecordValidationError: A line was rejected (first one wins).
            EmptyInputError: The file holds no records at all.
        """
        source = Path(path)
        if not source.is_file():
            raise InputNotFoundError(source)

        logger.info("Ingesting student records from %s", source)
        records: list[StudentRecord] = []
        seen_ids: set[int] = set()

        # Lines are decoded one at a time so an undecodable byte is reported
        # against the line that holds it.
        with source.open("rb") as fh:
            for line_number, raw_bytes in enumerate(fh, start=1):
                try:
                    line = raw_bytes.decode(self.config.input_encoding)
                except UnicodeDecodeError as exc:
                    error = RecordError(
                        kind=ErrorKind.INVALID_FORMAT,
                        line_number=line_number,
                        message=f"Line {line_number}: Not valid "
                        f"{self.config.input_encoding} text ({exc.reason})",
                    )
                    logger.error("Ingestion of %s aborted: %s", source, error.message)
                    raise RecordValidationError(error) from exc

                line = line.rstrip("\r\n")
                if not line.strip():
                    continue

                result = self.parser.parse(line, line_number, seen_ids)
                if isinstance(result, RecordError):
                    logger.error("Ingestion of %s aborted: %s", source, result.message)
                    raise RecordValidationError(result)

                records.append(result)
                seen_ids.add(result.student_id)

        if not records:
            logger.error("No student records found in %s", source)
            raise EmptyInputError(source)

        logger.info("Ingestion complete for %s: %d records", source, len(records))
        return records

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def write_reports(
        self,
        records: Sequence[StudentRecord],
        detail_path: PathLike,
        summary_path: PathLike,
    ) -> GradingReport:
        """Write the detail and summary reports for ``records``.

        Raises:
            ValueError: ``records`` is empty.
            ReportWriteError: An output directory could not be created or a
                file could not be written.
        """
        if not records:
            raise ValueError("Student record list cannot be empty")

        detail = Path(detail_path)
        summary = Path(summary_path)
        statistics = compute_summary(records, self.config.average_rounding)

        self._write_text(detail, render_detail_report(records))
        self._write_text(summary, render_summary_report(statistics))

        logger.info(
            "Reports written: detail=%s summary=%s (%d records)",
            detail,
            summary,
            len(records),
        )
        return GradingReport(
            detail_path=detail,
            summary_path=summary,
            records_written=len(records),
            statistics=statistics,
        )

    def run(
        self,
        input_path: PathLike,
        detail_path: Optional[PathLike] = None,
        summary_path: Optional[PathLike] = None,
    ) -> GradingReport:
        """Ingest ``input_path`` and write both reports.

        Output paths default to the configured report locations.
        """
        records = self.ingest(input_path)
        return self.write_reports(
            records,
            detail_path if detail_path is not None else self.config.detail_report_path,
            summary_path if summary_path is not None else self.config.summary_report_path,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _write_text(path: Path, content: str) -> None:
        """Create the parent directory if needed, then write ``content``."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Cannot create output directory for %s: %s", path, exc)
            raise ReportWriteError(
                path, ReportWriteReason.LOCATION_UNAVAILABLE, str(exc)
            ) from exc

        try:
            with path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
        except OSError as exc:
            logger.error("Cannot write report %s: %s", path, exc)
            raise ReportWriteError(path, ReportWriteReason.WRITE_FAILED, str(exc)) from exc
