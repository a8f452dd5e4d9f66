"""Contact block extraction: name and location from the header lines, handles from the whole text."""

from typing import Optional, Sequence

from resume_parser_ai.rules.line_classifier import is_section_header
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary
from resume_parser_ai.schemas.resume import ContactInfo

NAME_SCAN_LINES = 3
LOCATION_SCAN_LINES = 5


def extract_name(lines: Sequence[str], patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    """First of the top lines made of 2-4 alphabetic words."""
    for line in lines[:NAME_SCAN_LINES]:
        candidate = line.strip()
        if not patterns.name_line.match(candidate):
            continue
        if 2 <= len(candidate.split()) <= 4 and not is_section_header(candidate, patterns):
            return candidate
    return None


def extract_phone(text: str, patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    for pattern in patterns.phone_patterns:
        m = pattern.search(text)
        if m:
            return m.group(0)
    return None


def extract_website(text: str, patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    """First http(s):// or www. link that is not a LinkedIn/GitHub profile."""
    for m in patterns.website.finditer(text):
        url = m.group(0).rstrip(".")
        low = url.lower()
        if "linkedin.com" in low or "github.com" in low:
            continue
        return url
    return None


def extract_location(
    lines: Sequence[str],
    name: Optional[str] = None,
    patterns: PatternLibrary = PATTERNS,
) -> Optional[str]:
    """First "City, Region" segment in the header lines (segments split on | • ·)."""
    for line in lines[:LOCATION_SCAN_LINES]:
        for segment in patterns.contact_separator.split(line):
            segment = segment.strip()
            if not segment or segment == name:
                continue
            if not patterns.location_segment.match(segment):
                continue
            if patterns.job_role.search(segment) or patterns.company_suffix.search(segment):
                continue
            if patterns.institution.search(segment) or is_section_header(segment, patterns):
                continue
            return segment
    return None


def extract_contact(
    normalized_text: str,
    lines: Sequence[str],
    patterns: PatternLibrary = PATTERNS,
) -> ContactInfo:
    """
    Build the contact block for one document.

    Name and location come from the first lines; email, phone, LinkedIn, GitHub
    and website are single regex scans over the whitespace-normalized text.
    LinkedIn/GitHub handles are rewritten to canonical profile URLs.
    """
    name = extract_name(lines, patterns)

    email_match = patterns.email.search(normalized_text)
    linkedin_match = patterns.linkedin.search(normalized_text)
    github_match = patterns.github.search(normalized_text)

    return ContactInfo(
        name=name,
        email=email_match.group(0) if email_match else None,
        phone=extract_phone(normalized_text, patterns),
        location=extract_location(lines, name, patterns),
        linkedin=f"https://linkedin.com/in/{linkedin_match.group(1)}" if linkedin_match else None,
        github=f"https://github.com/{github_match.group(1)}" if github_match else None,
        website=extract_website(normalized_text, patterns),
    )
