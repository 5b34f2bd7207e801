"""Custom exceptions for the grading pipeline."""

from pathlib import Path

from gradeflow.schemas.errors import ErrorKind, RecordError, ReportWriteReason


class GradingError(Exception):
    """Base exception for pipeline failures."""

    kind: ErrorKind


class RecordValidationError(GradingError):
    """Raised when an input line is rejected; aborts the whole ingestion."""

    def __init__(self, error: RecordError):
        self.error = error
        self.kind = error.kind
        self.line_number = error.line_number
        super().__init__(error.message)


class EmptyInputError(GradingError):
    """Raised when a full scan finds no student records."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, source: Path):
        self.source = source
        super().__init__(f"No valid student records found in {source}")


class InputNotFoundError(GradingError, FileNotFoundError):
    """Raised when the student input file does not exist."""

    kind = ErrorKind.INPUT_NOT_FOUND

    def __init__(self, source: Path):
        self.source = source
        super().__init__(f"Input file not found: {source}")


class ReportWriteError(GradingError):
    """Raised when a report cannot be written.

    ``reason`` tells a missing/uncreatable output directory apart from a
    failure to open or write the file itself.
    """

    kind = ErrorKind.REPORT_WRITE_FAILURE

    def __init__(self, path: Path, reason: ReportWriteReason, detail: str):
        self.path = path
        self.reason = reason
        if reason is ReportWriteReason.LOCATION_UNAVAILABLE:
            message = f"Cannot create output location for {path}: {detail}"
        else:
            message = f"Cannot write report to {path}: {detail}"
        super().__init__(message)
