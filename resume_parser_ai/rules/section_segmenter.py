"""
Section segmentation over the trimmed line sequence.

A section body runs from the line after its header to the next line that is a
header of any section (or end of input). Header positions are computed once
per document, so locating a section is a single lookup instead of a rescan.
"""

from bisect import bisect_right
from typing import List, Optional, Pattern, Sequence

from resume_parser_ai.rules.line_classifier import is_section_header
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary

EMPTY_RANGE = range(0)


def build_header_index(lines: Sequence[str], patterns: PatternLibrary = PATTERNS) -> List[int]:
    """Indices of every line that starts a section, ascending."""
    return [i for i, line in enumerate(lines) if is_section_header(line, patterns)]


def locate_section(
    lines: Sequence[str],
    header_pattern: Pattern[str],
    header_indices: Optional[List[int]] = None,
    patterns: PatternLibrary = PATTERNS,
) -> range:
    """
    Body range of the first section whose header matches header_pattern.
    Returns an empty range when no line matches.
    """
    start = next((i for i, line in enumerate(lines) if header_pattern.match(line.strip())), None)
    if start is None:
        return EMPTY_RANGE
    if header_indices is None:
        header_indices = build_header_index(lines, patterns)
    pos = bisect_right(header_indices, start)
    end = header_indices[pos] if pos < len(header_indices) else len(lines)
    return range(start + 1, end)


class SectionIndex:
    """Lines of one document plus the precomputed header positions."""

    def __init__(self, lines: Sequence[str], patterns: PatternLibrary = PATTERNS) -> None:
        self.lines: List[str] = list(lines)
        self.patterns = patterns
        self.header_indices: List[int] = build_header_index(self.lines, patterns)

    def locate(self, section: str) -> range:
        return locate_section(
            self.lines,
            self.patterns.header_pattern(section),
            self.header_indices,
            self.patterns,
        )

    def section_lines(self, section: str) -> List[str]:
        body = self.locate(section)
        return self.lines[body.start:body.stop]
