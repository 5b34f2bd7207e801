"""Pydantic schemas for summary statistics and written report results."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from gradeflow.schemas.student import Grade


class SummaryStatistics(BaseModel):
    """Grade histogram plus aggregate score statistics for one run."""

    model_config = ConfigDict(frozen=True)

    grade_counts: dict[Grade, int] = Field(
        ...,
        description="Count per grade; all five grades present, in A-F order",
    )
    total_students: int = Field(..., ge=1)
    highest_score: int
    lowest_score: int
    average_score: Decimal = Field(..., decimal_places=2)


class GradingReport(BaseModel):
    """Outcome of writing the detail and summary reports."""

    detail_path: Path
    summary_path: Path
    records_written: int
    statistics: SummaryStatistics
