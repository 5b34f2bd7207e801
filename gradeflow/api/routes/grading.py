"""Grading endpoints.

Thin HTTP layer over ``ResultPipeline``: it resolves paths, calls the
pipeline's entry points, and maps pipeline errors onto HTTP responses.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from gradeflow.core.config import settings
from gradeflow.core.exceptions import (
    EmptyInputError,
    InputNotFoundError,
    RecordValidationError,
    ReportWriteError,
)
from gradeflow.core.logging import get_logger
from gradeflow.schemas.grading import (
    GradingRunRequest,
    GradingRunResponse,
    ValidationRequest,
    ValidationResponse,
)
from gradeflow.schemas.student import StudentRecord
from gradeflow.services.pipeline import ResultPipeline
from gradeflow.services.reporting.statistics import compute_summary

logger = get_logger(__name__)

router = APIRouter()


def get_pipeline() -> ResultPipeline:
    """Dependency that provides a fresh pipeline per request."""
    return ResultPipeline(settings)


@router.post("/run", response_model=GradingRunResponse)
def run_grading(
    request: GradingRunRequest,
    pipeline: ResultPipeline = Depends(get_pipeline),
) -> GradingRunResponse:
    """Grade a student records file and write the detail and summary reports.

    Any rejected line fails the whole request; no report is written.
    """
    detail_path = request.detail_path or str(pipeline.config.detail_report_path)
    summary_path = request.summary_path or str(pipeline.config.summary_report_path)
    logger.info("Grading run requested for %s", request.input_path)

    records = _ingest_or_raise(pipeline, request.input_path)
    try:
        report = pipeline.write_reports(records, detail_path, summary_path)
    except ReportWriteError as exc:
        raise HTTPException(
            status_code=500,
            detail={
                "kind": exc.kind.value,
                "reason": exc.reason.value,
                "path": str(exc.path),
                "message": str(exc),
            },
        )

    return GradingRunResponse(
        status="success",
        message=f"Processed {report.records_written} student records "
        f"from {request.input_path}",
        records_processed=report.records_written,
        detail_path=str(report.detail_path),
        summary_path=str(report.summary_path),
        statistics=report.statistics,
    )


@router.post("/validate", response_model=ValidationResponse)
def validate_file(
    request: ValidationRequest,
    pipeline: ResultPipeline = Depends(get_pipeline),
) -> ValidationResponse:
    """Ingest a student file and return its records without writing anything."""
    records = _ingest_or_raise(pipeline, request.input_path)
    return ValidationResponse(
        records_accepted=len(records),
        records=records,
        statistics=compute_summary(records, pipeline.config.average_rounding),
    )


def _ingest_or_raise(
    pipeline: ResultPipeline, input_path: str
) -> list[StudentRecord]:
    """Run ingestion, translating pipeline errors into HTTP errors."""
    try:
        return pipeline.ingest(input_path)
    except InputNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except RecordValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "kind": exc.kind.value,
                "line_number": exc.line_number,
                "field": exc.error.field,
                "message": str(exc),
            },
        )
    except EmptyInputError as exc:
        raise HTTPException(
            status_code=422,
            detail={"kind": exc.kind.value, "message": str(exc)},
        )
