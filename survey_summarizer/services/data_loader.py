"""Loading of template config and survey response files."""

import pandas as pd
import logging
from typing import Callable, Dict, List, Optional
from pathlib import Path

from ..models.errors import ConfigError, DataLoadError
from ..models.sheet import SheetValues
from ..utils.validators import (
    RESPONSE_FILE_FORMATS,
    TEMPLATE_FILE_FORMATS,
    validate_input_file,
    validate_template_columns,
)

logger = logging.getLogger(__name__)


class DataLoader:
    """Reads template config and response exports into plain string rows."""

    def __init__(self, settings=None):
        """Initialize data loader with settings."""
        self.settings = settings
        self.encoding = settings.data_encoding if settings else 'utf-8'
        self.header_columns_to_skip = settings.header_columns_to_skip if settings else 2

    def load_templates(self, file_path: str) -> List[Dict[str, str]]:
        """
        Load template config rows from a CSV file.

        Args:
            file_path: Path to the template config CSV

        Returns:
            Row dicts keyed by column name, in file order

        Raises:
            DataLoadError: If the file cannot be read
            ConfigError: If required columns are missing
        """
        is_valid, error_msg = validate_input_file(file_path, TEMPLATE_FILE_FORMATS)
        if not is_valid:
            raise DataLoadError(f"Template file validation failed: {error_msg}")

        df = self._read_with_fallbacks(file_path, lambda encoding: pd.read_csv(
            file_path, dtype=str, keep_default_na=False, encoding=encoding
        ))
        df.columns = [str(col).strip() for col in df.columns]

        is_valid, error_msg = validate_template_columns(df.columns)
        if not is_valid:
            raise ConfigError(error_msg)

        rows = df.to_dict(orient="records")
        logger.info(f"Loaded {len(rows)} template rows from {file_path}")
        return rows

    def load_responses(self, file_path: str, sheet_name: Optional[str] = None) -> List[SheetValues]:
        """
        Load survey responses as column-major sheets.

        Each form column becomes one row: the question header followed by every
        respondent's answer. The leading header columns are dropped.

        Args:
            file_path: Path to a CSV, TSV or Excel export
            sheet_name: Single Excel sheet to read, all sheets when omitted

        Returns:
            One SheetValues per sheet, in workbook order
        """
        is_valid, error_msg = validate_input_file(file_path, RESPONSE_FILE_FORMATS)
        if not is_valid:
            raise DataLoadError(f"Response file validation failed: {error_msg}")

        file_path_obj = Path(file_path)
        file_ext = file_path_obj.suffix.lower()

        if file_ext == '.csv':
            frames = {file_path_obj.stem: self._load_delimited(file_path, ',')}
        elif file_ext == '.tsv':
            frames = {file_path_obj.stem: self._load_delimited(file_path, '\t')}
        else:
            frames = self._load_excel(file_path, sheet_name)

        sheets = [self.to_sheet_values(df, str(title)) for title, df in frames.items()]
        logger.info(f"Loaded {len(sheets)} sheet(s) from {file_path}")
        return sheets

    def to_sheet_values(self, df: pd.DataFrame, title: Optional[str] = None) -> SheetValues:
        """Transpose a response table into [question, answers...] rows."""
        df = df.fillna("")
        rows = []
        for position, column in enumerate(df.columns):
            if position < self.header_columns_to_skip:
                continue
            answers = [str(value) for value in df.iloc[:, position].tolist()]
            rows.append([str(column)] + answers)

        logger.debug(f"Sheet {title!r}: {len(rows)} question columns, {len(df)} respondents")
        return SheetValues(rows=rows, title=title)

    def _load_delimited(self, file_path: str, sep: str) -> pd.DataFrame:
        return self._read_with_fallbacks(file_path, lambda encoding: pd.read_csv(
            file_path, sep=sep, dtype=str, keep_default_na=False, encoding=encoding
        ))

    def _load_excel(self, file_path: str, sheet_name: Optional[str] = None) -> Dict[str, pd.DataFrame]:
        try:
            if sheet_name:
                df = pd.read_excel(file_path, sheet_name=sheet_name, dtype=str, keep_default_na=False)
                return {sheet_name: df}
            return pd.read_excel(file_path, sheet_name=None, dtype=str, keep_default_na=False)
        except Exception as e:
            logger.error(f"Failed to load Excel file: {str(e)}")
            raise DataLoadError(f"Failed to load Excel file {file_path}: {e}") from e

    def _read_with_fallbacks(self, file_path: str, reader: Callable[[str], pd.DataFrame]) -> pd.DataFrame:
        """Read a text file, trying each configured encoding in turn."""
        encodings_to_try = self.settings.encoding_fallbacks if self.settings else [self.encoding, 'utf-8', 'latin-1', 'cp1252']

        for encoding in encodings_to_try:
            try:
                df = reader(encoding)
                logger.debug(f"Successfully loaded {file_path} with {encoding} encoding")
                return df
            except UnicodeDecodeError:
                continue
            except Exception as e:
                logger.error(f"Failed to load {file_path} with {encoding}: {str(e)}")
                raise DataLoadError(f"Failed to load {file_path}: {e}") from e

        raise DataLoadError(f"Unable to load {file_path} with any of the tried encodings: {encodings_to_try}")
