"""Core scanning and summarizing logic."""

from .catalog import TemplateCatalog
from .evaluator import evaluate
from .scanner import Scanner
from .summary_builder import Summary, build, build_for_kind
from .summarizer import SurveySummarizer

__all__ = ["TemplateCatalog", "evaluate", "Scanner", "Summary", "build", "build_for_kind", "SurveySummarizer"]
