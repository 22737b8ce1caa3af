"""Configuration for vcal."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

OutputFormat = Literal["vcs", "ics", "json"]


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="vcal.log")

    # Files
    output_dir: Path = Field(default=Path("data/calendars"))
    default_format: OutputFormat = Field(default="vcs")
    file_encoding: str = Field(default="utf-8")

    # HTTP adapter
    max_upload_bytes: int = Field(default=1024 * 1024, ge=1)

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Files
        if "OUTPUT_DIR" in os.environ:
            config_dict["output_dir"] = Path(os.environ["OUTPUT_DIR"])
        if "DEFAULT_FORMAT" in os.environ:
            config_dict["default_format"] = os.environ["DEFAULT_FORMAT"].lower()
        if "FILE_ENCODING" in os.environ:
            config_dict["file_encoding"] = os.environ["FILE_ENCODING"]

        # HTTP adapter
        if "MAX_UPLOAD_BYTES" in os.environ:
            try:
                config_dict["max_upload_bytes"] = int(os.environ["MAX_UPLOAD_BYTES"])
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
