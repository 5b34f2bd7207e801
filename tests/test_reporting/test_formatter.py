"""Tests for detail/summary report rendering."""

from decimal import Decimal

from gradeflow.schemas.report import SummaryStatistics
from gradeflow.schemas.student import Grade, StudentRecord
from gradeflow.services.reporting.formatter import (
    DETAIL_HEADER,
    SUMMARY_HEADER,
    render_detail_report,
    render_summary_report,
    sort_by_score,
)
from gradeflow.services.reporting.statistics import compute_summary


def _record(student_id: int, name: str, score: int) -> StudentRecord:
    return StudentRecord(student_id=student_id, full_name=name, score=score)


SAMPLE = [
    _record(1, "John Smith", 85),
    _record(2, "Jane Doe", 72),
    _record(3, "Michael Johnson", 91),
    _record(4, "Emily Williams", 68),
    _record(5, "Robert Brown", 55),
]


class TestSortByScore:
    def test_descending(self):
        assert [r.score for r in sort_by_score(SAMPLE)] == [91, 85, 72, 68, 55]

    def test_ties_keep_file_order(self):
        records = [
            _record(1, "First Seventy", 70),
            _record(2, "First Ninety", 90),
            _record(3, "Second Seventy", 70),
            _record(4, "Second Ninety", 90),
            _record(5, "Third Seventy", 70),
        ]
        assert [r.student_id for r in sort_by_score(records)] == [2, 4, 1, 3, 5]

    def test_input_not_mutated(self):
        records = list(SAMPLE)
        sort_by_score(records)
        assert records == SAMPLE


class TestRenderDetailReport:
    def test_sample_detail_report(self):
        expected = (
            "StudentID,FullName,Score,Grade\n"
            "3,Michael Johnson,91,A\n"
            "1,John Smith,85,A\n"
            "2,Jane Doe,72,B\n"
            "4,Emily Williams,68,C\n"
            "5,Robert Brown,55,D\n"
        )
        assert render_detail_report(SAMPLE) == expected

    def test_header_first(self):
        text = render_detail_report([_record(9, "Solo", 40)])
        assert text.splitlines() == [DETAIL_HEADER, "9,Solo,40,F"]


class TestRenderSummaryReport:
    def test_sample_summary_report(self):
        expected = (
            "Grade,Count\n"
            "A,2\n"
            "B,1\n"
            "C,1\n"
            "D,1\n"
            "F,0\n"
            "\n"
            "Total Students,5\n"
            "Highest Score,91\n"
            "Lowest Score,55\n"
            "Average Score,74.20\n"
        )
        assert render_summary_report(compute_summary(SAMPLE)) == expected

    def test_buckets_always_in_fixed_order(self):
        # Counts given out of order; the report still lists A..F
        stats = SummaryStatistics(
            grade_counts={Grade.F: 1, Grade.A: 0, Grade.C: 0, Grade.B: 0, Grade.D: 0},
            total_students=1,
            highest_score=10,
            lowest_score=10,
            average_score=Decimal("10.00"),
        )
        lines = render_summary_report(stats).splitlines()
        assert lines[0] == SUMMARY_HEADER
        assert lines[1:6] == ["A,0", "B,0", "C,0", "D,0", "F,1"]
        assert lines[6] == ""

    def test_average_always_two_places(self):
        text = render_summary_report(compute_summary([_record(1, "Full Marks", 100)]))
        assert text.endswith("Average Score,100.00\n")
