#!/usr/bin/env python3
"""
Run the Gradeflow pipeline once over the configured file locations.

Reads <data_dir>/students.txt, writes <data_dir>/report.txt and
<data_dir>/summary.csv.  When the input file is missing, the canonical
five-student sample is written first.  Exits with status 1 on any
pipeline error.
"""

from __future__ import annotations

import sys

from generate_sample_data import CANONICAL_STUDENTS, write_students_file

from gradeflow.core.config import settings
from gradeflow.core.exceptions import GradingError
from gradeflow.core.logging import setup_logging
from gradeflow.services.pipeline import ResultPipeline


def main() -> int:
    logger = setup_logging(settings.log_level)

    input_path = settings.student_input_path
    if not input_path.exists():
        try:
            write_students_file(input_path, CANONICAL_STUDENTS)
        except OSError as exc:
            logger.error("Cannot create sample input %s: %s", input_path, exc)
            print(f"Error: Cannot create sample input file {input_path}: {exc}")
            return 1
        print(f"Sample input file created at: {input_path}")

    pipeline = ResultPipeline(settings)
    try:
        report = pipeline.run(input_path)
    except GradingError as exc:
        logger.error("Grading run failed: %s", exc)
        print(f"Error: {exc}")
        return 1

    print(f"\nSuccessfully processed {report.records_written} student records")
    print(f"Detailed report saved to: {report.detail_path}")
    print(f"Summary statistics saved to: {report.summary_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
