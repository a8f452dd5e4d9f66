"""Education extraction: boundary lines open entries, other lines patch GPA / field of study."""

from typing import Dict, List, Optional

from resume_parser_ai.rules.experience_extractor import extract_date_span
from resume_parser_ai.rules.line_classifier import looks_like_education_line
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary
from resume_parser_ai.rules.section_segmenter import SectionIndex
from resume_parser_ai.schemas.resume import EducationEntry


class _EducationDraft:
    """Mutable builder for the entry in progress; fields are patched until a boundary flushes it."""

    __slots__ = ("institution", "degree", "field", "start_date", "end_date", "gpa", "location")

    def __init__(self) -> None:
        self.institution: Optional[str] = None
        self.degree: Optional[str] = None
        self.field: Optional[str] = None
        self.start_date: Optional[str] = None
        self.end_date: Optional[str] = None
        self.gpa: Optional[str] = None
        self.location: Optional[str] = None

    def merge(self, values: Dict[str, str]) -> None:
        # Later matches overwrite earlier ones for the same field
        for key, value in values.items():
            setattr(self, key, value)

    def has_identity(self) -> bool:
        return bool(self.institution or self.degree)

    def to_entry(self) -> EducationEntry:
        # Missing institution/degree fall back to the Unknown placeholders
        return EducationEntry(
            institution=self.institution,
            degree=self.degree,
            field=self.field,
            start_date=self.start_date,
            end_date=self.end_date,
            gpa=self.gpa,
            location=self.location,
        )


def extract_institution(line: str, patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    """Longest separator-delimited phrase of the line that contains an institution keyword."""
    remainder = patterns.date_range.sub("", line)
    candidates = [
        part.strip(" \t()[]")
        for part in patterns.institution_separator.split(remainder)
        if patterns.institution.search(part)
    ]
    candidates = [c for c in candidates if c]
    if not candidates:
        return None
    return max(candidates, key=len)


def parse_education_line(line: str, patterns: PatternLibrary = PATTERNS) -> _EducationDraft:
    """Degree keyword, institution phrase and date range of a boundary line."""
    draft = _EducationDraft()
    dates = extract_date_span(line, patterns)
    draft.start_date = dates.start_date
    draft.end_date = dates.end_date

    degree_match = patterns.degree.search(line)
    if degree_match:
        draft.degree = degree_match.group(1)
    draft.institution = extract_institution(line, patterns)
    return draft


def parse_education_info(line: str, patterns: PatternLibrary = PATTERNS) -> Dict[str, str]:
    """GPA and field of study found on a non-boundary line (only the keys that matched)."""
    info: Dict[str, str] = {}
    gpa_match = patterns.gpa.search(line)
    if gpa_match:
        info["gpa"] = gpa_match.group(0)
    field_match = patterns.field_of_study.search(line)
    if field_match:
        info["field"] = field_match.group(1)
    return info


def _flush(draft: _EducationDraft, out: List[EducationEntry]) -> None:
    if draft.has_identity():
        out.append(draft.to_entry())


def extract_education(sections: SectionIndex) -> List[EducationEntry]:
    patterns = sections.patterns
    entries: List[EducationEntry] = []
    draft = _EducationDraft()

    for line in sections.section_lines("education"):
        if looks_like_education_line(line, patterns):
            _flush(draft, entries)
            draft = parse_education_line(line, patterns)
        else:
            draft.merge(parse_education_info(line, patterns))

    _flush(draft, entries)
    return entries
