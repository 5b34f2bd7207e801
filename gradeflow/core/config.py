"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with defaults and env var overrides."""

    # App
    app_env: str = "development"
    app_port: int = 8000
    log_level: str = "INFO"

    # Input parsing
    field_delimiter: str = ","
    input_encoding: str = "utf-8-sig"  # tolerate a BOM on the first line

    # File locations (relative paths resolve against the working directory)
    data_dir: Path = Path("data")
    student_input_file: str = "students.txt"
    detail_report_file: str = "report.txt"
    summary_report_file: str = "summary.csv"

    # Average score formatting
    average_rounding: Literal["half_up", "half_even"] = "half_up"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def student_input_path(self) -> Path:
        return self.data_dir / self.student_input_file

    @property
    def detail_report_path(self) -> Path:
        return self.data_dir / self.detail_report_file

    @property
    def summary_report_path(self) -> Path:
        return self.data_dir / self.summary_report_file


settings = Settings()
