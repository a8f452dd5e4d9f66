"""Whitespace normalization and line splitting for raw resume text."""

import re
import unicodedata
from typing import List

_WHITESPACE_RE = re.compile(r"\s+")
_INLINE_SPACES_RE = re.compile(r"[ \t\u00a0]+")


def normalize_text(text: str) -> str:
    """Collapse every whitespace run (newlines included) to a single space."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_lines(text: str) -> List[str]:
    """Split on line breaks; collapse inline spaces, trim, drop empty lines."""
    lines = []
    for raw in text.splitlines():
        line = _INLINE_SPACES_RE.sub(" ", raw).strip()
        if line:
            lines.append(line)
    return lines


def clean_cv_text(text: str, max_chars: int) -> str:
    """Normalize unicode (NFC), squeeze blank lines and truncate decoded CV text."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars] + "\n\n[Content truncated.]"
    return t
