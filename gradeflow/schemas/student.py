"""Pydantic schemas for validated student records and letter grades."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Grade(str, Enum):
    """Letter grade buckets."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# Report order for grade buckets; do not derive from dict/enum iteration.
GRADE_ORDER: tuple[Grade, ...] = (Grade.A, Grade.B, Grade.C, Grade.D, Grade.F)

# Lowest score that earns each grade, checked top-down
_GRADE_FLOORS: tuple[tuple[int, Grade], ...] = (
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)

MIN_SCORE = 0
MAX_SCORE = 100

# Largest accepted student ID (signed 32-bit)
MAX_STUDENT_ID = 2_147_483_647


def grade_for_score(score: int) -> Grade:
    """Map a 0-100 score onto its letter grade.

    A: 80-100, B: 70-79, C: 60-69, D: 50-59, F: 0-49.
    """
    for floor, grade in _GRADE_FLOORS:
        if score >= floor:
            return grade
    return Grade.F


class StudentRecord(BaseModel):
    """One accepted student entry.

    Building an instance is the validation gate: a record with a
    non-positive id, a blank name or a score outside 0-100 raises
    ``pydantic.ValidationError`` and never exists.  The grade is derived
    from the score on every access.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    student_id: int = Field(
        ..., gt=0, le=MAX_STUDENT_ID, description="Unique positive student ID"
    )
    full_name: str = Field(..., min_length=1, description="Name, whitespace-trimmed")
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)

    @field_validator("full_name")
    @classmethod
    def _strip_full_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("full name cannot be empty")
        return stripped

    @computed_field  # type: ignore[prop-decorator]
    @property
    def grade(self) -> Grade:
        return grade_for_score(self.score)

    def to_row(self, delimiter: str = ",") -> str:
        """Render as ``id,fullName,score,grade`` (no line terminator)."""
        return delimiter.join(
            [str(self.student_id), self.full_name, str(self.score), self.grade.value]
        )
