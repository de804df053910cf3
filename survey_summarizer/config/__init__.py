"""Configuration management for survey summarizer."""

from .settings import Settings

__all__ = ["Settings"]
