"""Utility functions and helpers."""

from .validators import validate_input_file, validate_template_columns, validate_first_name

__all__ = ["validate_input_file", "validate_template_columns", "validate_first_name"]
