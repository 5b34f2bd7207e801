"""Pydantic schemas for the grading API requests and responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from gradeflow.schemas.report import SummaryStatistics
from gradeflow.schemas.student import StudentRecord


class GradingRunRequest(BaseModel):
    """Request body to grade a student file and write both reports."""

    input_path: str = Field(..., description="Path to the student records file")
    detail_path: Optional[str] = Field(
        None,
        description="Where to write the detail report; defaults to settings",
    )
    summary_path: Optional[str] = Field(
        None,
        description="Where to write the summary report; defaults to settings",
    )


class GradingRunResponse(BaseModel):
    """Returned after both reports were written."""

    status: str = Field(..., description="Run result status (success)")
    message: str
    records_processed: int
    detail_path: str
    summary_path: str
    statistics: SummaryStatistics


class ValidationRequest(BaseModel):
    """Request body to validate a student file without writing reports."""

    input_path: str


class ValidationResponse(BaseModel):
    """Accepted records and their statistics for a dry run."""

    records_accepted: int
    records: list[StudentRecord]
    statistics: SummaryStatistics
