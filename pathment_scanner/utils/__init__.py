"""Utility helpers for logging and string handling."""

from pathment_scanner.utils.log import setup_logging, log
from pathment_scanner.utils.text import is_blank, truncate, text_without_extracted

__all__ = [
    "setup_logging",
    "log",
    "is_blank",
    "truncate",
    "text_without_extracted",
]
