"""Classified error values produced while ingesting and reporting."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Stable machine-readable error tags."""

    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"  # also covers out-of-range scores
    DUPLICATE_ID = "duplicate_id"
    EMPTY_INPUT = "empty_input"
    INPUT_NOT_FOUND = "input_not_found"
    REPORT_WRITE_FAILURE = "report_write_failure"


class ReportWriteReason(str, Enum):
    """Sub-kinds of a report write failure."""

    LOCATION_UNAVAILABLE = "location_unavailable"
    WRITE_FAILED = "write_failed"


class RecordError(BaseModel):
    """A rejected input line, returned by the parser instead of a record."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    line_number: int = Field(..., ge=1)
    message: str
    field: Optional[str] = Field(
        None,
        description="Offending field: 'student ID', 'name' or 'score'",
    )
    value: Optional[str] = Field(None, description="Raw offending value, if any")
