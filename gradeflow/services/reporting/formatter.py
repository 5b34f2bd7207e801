"""Text rendering for the detail and summary report artifacts."""

from __future__ import annotations

from typing import Sequence

from gradeflow.schemas.report import SummaryStatistics
from gradeflow.schemas.student import GRADE_ORDER, StudentRecord

DETAIL_HEADER = "StudentID,FullName,Score,Grade"
SUMMARY_HEADER = "Grade,Count"

# Report files are always comma-separated, whatever the input delimiter.
_OUTPUT_DELIMITER = ","


def sort_by_score(records: Sequence[StudentRecord]) -> list[StudentRecord]:
    """Order records by score, highest first.

    ``sorted`` is stable, so equal scores keep their file order.
    """
    return sorted(records, key=lambda record: record.score, reverse=True)


def render_detail_report(records: Sequence[StudentRecord]) -> str:
    """Header plus one ``id,fullName,score,grade`` row per record."""
    lines = [DETAIL_HEADER]
    lines.extend(record.to_row(_OUTPUT_DELIMITER) for record in sort_by_score(records))
    return "\n".join(lines) + "\n"


def render_summary_report(stats: SummaryStatistics) -> str:
    """Grade histogram in A-F order, a blank line, then the aggregates."""
    lines = [SUMMARY_HEADER]
    for grade in GRADE_ORDER:
        lines.append(f"{grade.value},{stats.grade_counts.get(grade, 0)}")

    lines.append("")
    lines.append(f"Total Students,{stats.total_students}")
    lines.append(f"Highest Score,{stats.highest_score}")
    lines.append(f"Lowest Score,{stats.lowest_score}")
    lines.append(f"Average Score,{stats.average_score:.2f}")
    return "\n".join(lines) + "\n"
