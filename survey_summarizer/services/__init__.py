"""File input and report output."""

from .data_loader import DataLoader
from .report_generator import ReportGenerator

__all__ = ["DataLoader", "ReportGenerator"]
