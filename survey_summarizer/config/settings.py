"""Configuration management for the survey summarizer."""

import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Configuration settings for the survey summarizer."""

    # Summary output
    summary_sheet_name: str = "Chart and Summary"
    output_dir: str = "output"
    empty_cell_marker: str = "N/A"

    # Template config
    name_placeholder: str = "{name}"

    # Response scanning
    header_columns_to_skip: int = 2  # form timestamp and respondent columns
    grade_error_policy: str = "skip"
    ignore_blank_answers: bool = False

    # Data processing settings
    data_encoding: str = "utf-8"
    encoding_fallbacks: list = None

    # UI/Display settings
    show_progress: bool = True

    def __post_init__(self):
        """Initialize derived settings after object creation."""
        if self.encoding_fallbacks is None:
            self.encoding_fallbacks = [self.data_encoding, 'utf-8', 'latin-1', 'cp1252']

    @classmethod
    def from_env(cls, env_file: str = None) -> "Settings":
        """Create settings from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        settings = cls(
            summary_sheet_name=os.getenv("SUMMARY_SHEET_NAME", "Chart and Summary"),
            output_dir=os.getenv("OUTPUT_DIR", "output"),
            empty_cell_marker=os.getenv("EMPTY_CELL_MARKER", "N/A"),
            name_placeholder=os.getenv("NAME_PLACEHOLDER", "{name}"),
            header_columns_to_skip=int(os.getenv("HEADER_COLUMNS_TO_SKIP", "2")),
            grade_error_policy=os.getenv("GRADE_ERROR_POLICY", "skip").lower(),
            ignore_blank_answers=os.getenv("IGNORE_BLANK_ANSWERS", "false").lower() == "true",
            data_encoding=os.getenv("DATA_ENCODING", "utf-8"),
            show_progress=os.getenv("SHOW_PROGRESS", "true").lower() == "true"
        )
        logger.debug(f"Loaded settings: {settings}")
        return settings

    def validate(self) -> None:
        """Validate configuration settings."""
        if self.grade_error_policy not in ("skip", "fail"):
            raise ValueError("GRADE_ERROR_POLICY must be 'skip' or 'fail'")

        if self.header_columns_to_skip < 0:
            raise ValueError("HEADER_COLUMNS_TO_SKIP must not be negative")

        if not self.name_placeholder:
            raise ValueError("NAME_PLACEHOLDER is required")

        if not self.summary_sheet_name:
            raise ValueError("SUMMARY_SHEET_NAME is required")
