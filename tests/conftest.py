"""Shared test fixtures for the Gradeflow pipeline tests.

Everything runs against files under pytest's ``tmp_path``; nothing touches
the real data/ directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from gradeflow.core.config import Settings
from gradeflow.main import app
from gradeflow.services.pipeline import ResultPipeline

# The canonical sample file: scores [85, 72, 91, 68, 55]
SAMPLE_LINES = [
    "1,John Smith,85",
    "2,Jane Doe,72",
    "3,Michael Johnson,91",
    "4,Emily Williams,68",
    "5,Robert Brown,55",
]


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing all default locations into the temp directory."""
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def pipeline(test_settings: Settings) -> ResultPipeline:
    return ResultPipeline(test_settings)


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes raw text to a temp input file and returns its path."""

    def _write(content: str, name: str = "students.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_file(write_input: Callable[..., Path], sample_lines: list[str]) -> Path:
    return write_input("\n".join(sample_lines) + "\n")


@pytest.fixture(scope="function")
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c
