"""Survey Summarizer

Template-driven scanning and summarizing of survey and feedback responses.
"""

__version__ = "1.0.0"
__author__ = "Survey Summarizer Team"

from .core.summarizer import SurveySummarizer

__all__ = ["SurveySummarizer"]
