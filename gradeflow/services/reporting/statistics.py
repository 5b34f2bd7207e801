"""Aggregate statistics over an accepted set of student records.

Pure functions: no I/O, so they are trivial to unit-test.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from typing import Sequence

from gradeflow.schemas.report import SummaryStatistics
from gradeflow.schemas.student import GRADE_ORDER, Grade, StudentRecord

_TWO_PLACES = Decimal("0.01")

_ROUNDING_MODES: dict[str, str] = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
}


def average_score(scores: Sequence[int], rounding: str = "half_up") -> Decimal:
    """Mean of ``scores`` rounded to exactly two decimal places.

    Args:
        scores: Non-empty list of integer scores.
        rounding: ``half_up`` (74.125 -> 74.13) or ``half_even``
            (74.125 -> 74.12).

    Raises:
        ValueError: If ``scores`` is empty or the rounding mode is unknown.
    """
    if not scores:
        raise ValueError("Cannot average an empty score list")
    try:
        mode = _ROUNDING_MODES[rounding]
    except KeyError:
        raise ValueError(f"Unknown rounding mode: {rounding!r}") from None

    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return mean.quantize(_TWO_PLACES, rounding=mode)


def compute_summary(
    records: Sequence[StudentRecord], rounding: str = "half_up"
) -> SummaryStatistics:
    """Build the grade histogram and score aggregates in a single pass."""
    if not records:
        raise ValueError("Cannot summarize an empty record list")

    counts: dict[Grade, int] = {grade: 0 for grade in GRADE_ORDER}
    scores: list[int] = []
    highest = records[0].score
    lowest = records[0].score

    for record in records:
        counts[record.grade] += 1
        scores.append(record.score)
        highest = max(highest, record.score)
        lowest = min(lowest, record.score)

    return SummaryStatistics(
        grade_counts=counts,
        total_students=len(records),
        highest_score=highest,
        lowest_score=lowest,
        average_score=average_score(scores, rounding),
    )
