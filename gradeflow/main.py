"""Gradeflow Student Results Service - Main Application."""

from fastapi import FastAPI

from gradeflow.api.routes import grading
from gradeflow.core.config import settings
from gradeflow.core.logging import setup_logging

# Configure logging before anything else
logger = setup_logging(settings.log_level)

tags_metadata = [
    {
        "name": "Health",
        "description": "Service health and readiness checks.",
    },
    {
        "name": "Grading",
        "description": (
            "Validate student record files and produce the detail report "
            "(records by score, descending) and the summary report (grade "
            "histogram plus score statistics)."
        ),
    },
]


app = FastAPI(
    title="Gradeflow Student Results Service",
    description=(
        "## Student Result Processing API\n\n"
        "Ingests `id,fullName,score` text files, rejects malformed or "
        "duplicate lines with line-level diagnostics, assigns letter grades "
        "and writes two reports.\n\n"
        "### Grade Buckets\n"
        "| Grade | Scores |\n"
        "|-------|--------|\n"
        "| **A** | 80-100 |\n"
        "| **B** | 70-79 |\n"
        "| **C** | 60-69 |\n"
        "| **D** | 50-59 |\n"
        "| **F** | 0-49 |\n\n"
        "### Error Kinds\n"
        "- `missing_field` - fewer than 3 fields, or an empty name\n"
        "- `invalid_format` - non-numeric ID/score, non-positive ID, score outside 0-100\n"
        "- `duplicate_id` - student ID already seen on an earlier line\n"
        "- `empty_input` - the file holds no records\n"
        "- `report_write_failure` - an output file could not be written\n"
    ),
    version="1.0.0",
    openapi_tags=tags_metadata,
    license_info={
        "name": "MIT",
    },
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(grading.router, prefix="/api/v1/grading", tags=["Grading"])

logger.info("Gradeflow API ready - routes registered")


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint.

    Returns a simple JSON object confirming the service is running.
    """
    return {"status": "healthy", "service": "gradeflow"}
