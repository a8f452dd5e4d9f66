"""Rule-based (regex/heuristic) resume extraction."""

from .patterns import PATTERNS, SECTION_ORDER, PatternLibrary
from .rules_parser import extract_resume, parse_resume_with_rules
from .section_segmenter import SectionIndex, build_header_index, locate_section

__all__ = [
    "PATTERNS",
    "SECTION_ORDER",
    "PatternLibrary",
    "SectionIndex",
    "build_header_index",
    "locate_section",
    "extract_resume",
    "parse_resume_with_rules",
]
