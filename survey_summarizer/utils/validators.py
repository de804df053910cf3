"""Simple validation utilities."""

import os
from typing import Iterable, List, Tuple
from pathlib import Path

from ..models.template import TEMPLATE_COLUMNS

RESPONSE_FILE_FORMATS = ['.xlsx', '.xls', '.csv', '.tsv']
TEMPLATE_FILE_FORMATS = ['.csv']


def validate_input_file(file_path: str, supported_formats: List[str] = None) -> Tuple[bool, str]:
    """
    Validate input file exists and has a supported extension.

    Args:
        file_path: Path to the input file
        supported_formats: Allowed extensions, defaults to response file formats

    Returns:
        Tuple of (is_valid, error_message)
    """
    if supported_formats is None:
        supported_formats = RESPONSE_FILE_FORMATS

    if not os.path.exists(file_path):
        return False, f"Input file not found: {file_path}"

    if not os.path.isfile(file_path):
        return False, f"Input path is not a file: {file_path}"

    file_ext = Path(file_path).suffix.lower()
    if file_ext not in supported_formats:
        return False, f"Unsupported file format: {file_ext}. Use {', '.join(supported_formats)}"

    return True, "File validation successful"


def validate_template_columns(columns: Iterable[str]) -> Tuple[bool, str]:
    """Check that a template config header has every required column."""
    available = [str(col).strip() for col in columns]
    missing_columns = [col for col in TEMPLATE_COLUMNS if col not in available]
    if missing_columns:
        return False, (f"Missing required columns: {missing_columns}. "
                       f"Available columns: {available}")

    return True, "Template columns valid"


def validate_first_name(first_name: str) -> List[str]:
    """Validate the name substituted into templates."""
    errors = []

    if not first_name or not first_name.strip():
        errors.append("first name is required")

    return errors
