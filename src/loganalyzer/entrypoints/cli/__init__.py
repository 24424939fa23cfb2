"""Command-line interface for LOGANALYZER."""

from .main import loganalyzer

__all__ = ["loganalyzer"]
