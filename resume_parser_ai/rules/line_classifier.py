"""Stateless per-line heuristics: section headers, job-title lines, education lines, bullets."""

from typing import Optional

from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary


def detect_section_header(line: str, patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    """
    Return the section name if the trimmed line is a section header, else None.
    Header patterns are scanned in priority order; the first match wins.
    """
    text = line.strip()
    for name, pattern in patterns.section_headers:
        if pattern.match(text):
            return name
    return None


def is_section_header(line: str, patterns: PatternLibrary = PATTERNS) -> bool:
    return detect_section_header(line, patterns) is not None


def looks_like_job_title_line(line: str, patterns: PatternLibrary = PATTERNS) -> bool:
    """Role or company keyword, plus a 19xx/20xx year somewhere on the line."""
    has_role = bool(patterns.job_role.search(line) or patterns.company_suffix.search(line))
    return has_role and bool(patterns.year.search(line))


def looks_like_education_line(line: str, patterns: PatternLibrary = PATTERNS) -> bool:
    """Institution/degree keyword, or any 19xx/20xx year (looser than the job-title test)."""
    return bool(
        patterns.institution.search(line)
        or patterns.degree_keyword.search(line)
        or patterns.year.search(line)
    )


def is_bullet_line(line: str, patterns: PatternLibrary = PATTERNS) -> bool:
    return bool(patterns.bullet.match(line))


def strip_bullet(line: str, patterns: PatternLibrary = PATTERNS) -> str:
    """Remove a leading bullet marker; lines without one are returned trimmed."""
    return patterns.bullet.sub("", line.strip(), count=1).strip()
