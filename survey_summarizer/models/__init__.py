"""Data models and structures."""

from .template import QuestionTemplate, ResponseKind
from .accumulation import (
    AccumulatorKey,
    CategoryAccumulation,
    InvalidValue,
    ScanResult,
    SkippedRow,
    SummaryReport,
)
from .summary_rows import SummaryRows
from .sheet import SheetValues
from .errors import (
    ConfigError,
    DataLoadError,
    EmptyAccumulation,
    EvalError,
    NonNumericGrade,
    SurveySummarizerError,
    TemplateNotFound,
)

__all__ = [
    "QuestionTemplate", "ResponseKind", "AccumulatorKey", "CategoryAccumulation",
    "InvalidValue", "ScanResult", "SkippedRow", "SummaryReport", "SummaryRows", "SheetValues",
    "ConfigError", "DataLoadError", "EmptyAccumulation", "EvalError",
    "NonNumericGrade", "SurveySummarizerError", "TemplateNotFound",
]
