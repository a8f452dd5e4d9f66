"""Work experience extraction: a two-state walk over the experience section."""

from typing import List, Optional

from resume_parser_ai.rules.line_classifier import (
    is_bullet_line,
    looks_like_job_title_line,
    strip_bullet,
)
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary
from resume_parser_ai.rules.section_segmenter import SectionIndex
from resume_parser_ai.schemas.resume import DateSpan, ExperienceEntry

# Non-bullet lines this short are layout noise, not description text
MIN_CONTINUATION_CHARS = 20

_PART_STRIP_CHARS = " \t()[]|"
# Separator left dangling once the date range is cut out ("Engineer - Acme -")
_EDGE_SEPARATOR_CHARS = " \t-–—,|@"


def extract_date_span(line: str, patterns: PatternLibrary = PATTERNS) -> DateSpan:
    """First date range on the line ("Jan 2020 - Present"); empty span if none."""
    m = patterns.date_range.search(line)
    if not m:
        return DateSpan()
    return DateSpan(start_date=m.group("start").strip(), end_date=m.group("end").strip())


class _JobDraft:
    """Entry being accumulated until the next job-title line or section end."""

    def __init__(self, position: str, company: str, location: Optional[str], dates: DateSpan) -> None:
        self.position = position
        self.company = company
        self.location = location
        self.dates = dates
        self.description: List[str] = []

    def is_complete(self) -> bool:
        return bool(self.position and self.company)

    def to_entry(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            position=self.position,
            start_date=self.dates.start_date,
            end_date=self.dates.end_date,
            location=self.location,
            description=self.description or None,
            current=self.dates.current,
        )


def parse_job_line(line: str, patterns: PatternLibrary = PATTERNS) -> _JobDraft:
    """
    Split a job-title line into position / company / location.

    The date range is captured first and removed; the remainder is split on
    title separators (" - ", en/em dash, comma, " | ", " @ ", " at "). Without a
    separator the whole remainder is the position and company stays empty.
    """
    dates = extract_date_span(line, patterns)
    remainder = patterns.date_range.sub("", line).strip(_EDGE_SEPARATOR_CHARS)
    parts = [p.strip(_PART_STRIP_CHARS) for p in patterns.title_separator.split(remainder)]
    parts = [p for p in parts if p]

    if len(parts) >= 2:
        location = parts[2] if len(parts) > 2 else None
        return _JobDraft(parts[0], parts[1], location, dates)
    position = parts[0] if parts else ""
    return _JobDraft(position, "", None, dates)


def _flush(draft: Optional[_JobDraft], out: List[ExperienceEntry]) -> None:
    # Entries missing either company or position are dropped
    if draft is not None and draft.is_complete():
        out.append(draft.to_entry())


def extract_experience(sections: SectionIndex) -> List[ExperienceEntry]:
    patterns = sections.patterns
    entries: List[ExperienceEntry] = []
    draft: Optional[_JobDraft] = None

    for line in sections.section_lines("experience"):
        if looks_like_job_title_line(line, patterns):
            _flush(draft, entries)
            draft = parse_job_line(line, patterns)
        elif is_bullet_line(line, patterns):
            if draft is not None:
                text = strip_bullet(line, patterns)
                if text:
                    draft.description.append(text)
        elif draft is not None and draft.position and len(line) > MIN_CONTINUATION_CHARS:
            draft.description.append(line.strip())

    _flush(draft, entries)
    return entries
