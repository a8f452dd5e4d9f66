"""Utility exports."""

from .logger import get_logger
from .text import clean_cv_text, normalize_text, split_lines

__all__ = [
    "get_logger",
    "normalize_text",
    "split_lines",
    "clean_cv_text",
]
