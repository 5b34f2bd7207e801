"""Pydantic schemas for the grading pipeline."""

from gradeflow.schemas.errors import ErrorKind, RecordError, ReportWriteReason
from gradeflow.schemas.report import GradingReport, SummaryStatistics
from gradeflow.schemas.student import GRADE_ORDER, Grade, StudentRecord, grade_for_score

__all__ = [
    "ErrorKind",
    "RecordError",
    "ReportWriteReason",
    "GradingReport",
    "SummaryStatistics",
    "GRADE_ORDER",
    "Grade",
    "StudentRecord",
    "grade_for_score",
]
