"""Line-level parser for student record files.

Each non-blank line of the input holds ``id,fullName,score``.  The parser
turns one line into a validated ``StudentRecord`` or a ``RecordError``
describing exactly why the line was rejected.  It never raises for bad
input and never mutates the caller's set of seen ids.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Optional, Union

from pydantic import ValidationError

from gradeflow.core.logging import get_logger
from gradeflow.schemas.errors import ErrorKind, RecordError
from gradeflow.schemas.student import (
    MAX_SCORE,
    MAX_STUDENT_ID,
    MIN_SCORE,
    StudentRecord,
)

logger = get_logger(__name__)

# Optional sign followed by ASCII digits only (no underscores, no decimals)
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

ParseResult = Union[StudentRecord, RecordError]


def parse_int(value: str) -> Optional[int]:
    """Strictly parse a trimmed integer string, returning None on failure."""
    stripped = value.strip()
    if not _INTEGER_RE.match(stripped):
        return None
    return int(stripped)


class RecordParser:
    """Parser for ``id,fullName,score`` student lines."""

    expected_fields: int = 3

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def parse(
        self, raw_line: str, line_number: int, seen_ids: AbstractSet[int]
    ) -> ParseResult:
        """Parse one raw line.

        Args:
            raw_line: Line text without its terminator.  Blank lines must be
                filtered out by the caller.
            line_number: 1-based position of the line in the source file.
            seen_ids: IDs accepted on earlier lines.

        Returns:
            The new StudentRecord, or a RecordError tagged with its kind.
            On success the caller adds ``record.student_id`` to its id set.
        """
        parts = raw_line.split(self.delimiter)

        # --- field count ----------------------------------------------------
        if len(parts) < self.expected_fields:
            return self._reject(
                ErrorKind.MISSING_FIELD,
                line_number,
                f"Line {line_number}: Expected {self.expected_fields} fields, "
                f"got {len(parts)}",
            )
        if len(parts) > self.expected_fields:
            return self._reject(
                ErrorKind.INVALID_FORMAT,
                line_number,
                f"Line {line_number}: Expected {self.expected_fields} fields, "
                f"got {len(parts)}",
            )

        raw_id, raw_name, raw_score = (part.strip() for part in parts)

        # --- student ID -----------------------------------------------------
        student_id = parse_int(raw_id)
        if student_id is None or not 0 < student_id <= MAX_STUDENT_ID:
            return self._reject(
                ErrorKind.INVALID_FORMAT,
                line_number,
                f"Line {line_number}: Invalid student ID format {raw_id!r}",
                field="student ID",
                value=raw_id,
            )

        # --- name -----------------------------------------------------------
        if not raw_name:
            return self._reject(
                ErrorKind.MISSING_FIELD,
                line_number,
                f"Line {line_number}: Student name cannot be empty",
                field="name",
            )

        # --- score ----------------------------------------------------------
        score = parse_int(raw_score)
        if score is None:
            return self._reject(
                ErrorKind.INVALID_FORMAT,
                line_number,
                f"Line {line_number}: Invalid score format {raw_score!r}",
                field="score",
                value=raw_score,
            )

        try:
            record = StudentRecord(
                student_id=student_id, full_name=raw_name, score=score
            )
        except ValidationError:
            # ID and name were checked above; only the score range is left.
            return self._reject(
                ErrorKind.INVALID_FORMAT,
                line_number,
                f"Line {line_number}: Score must be between {MIN_SCORE} and "
                f"{MAX_SCORE} (got {score})",
                field="score",
                value=raw_score,
            )

        # --- uniqueness -----------------------------------------------------
        if record.student_id in seen_ids:
            return self._reject(
                ErrorKind.DUPLICATE_ID,
                line_number,
                f"Line {line_number}: Duplicate student ID {record.student_id}",
                field="student ID",
                value=str(record.student_id),
            )

        logger.debug(
            "Parsed line %d: id=%d score=%d grade=%s",
            line_number,
            record.student_id,
            record.score,
            record.grade.value,
        )
        return record

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _reject(
        kind: ErrorKind,
        line_number: int,
        message: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ) -> RecordError:
        logger.warning("Rejected line %d (%s): %s", line_number, kind.value, message)
        return RecordError(
            kind=kind,
            line_number=line_number,
            message=message,
            field=field,
            value=value,
        )
