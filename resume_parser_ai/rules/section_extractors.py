"""Summary, skills, achievements, and the placeholder section extractors."""

from typing import List, Optional, Sequence

from resume_parser_ai.rules.line_classifier import is_section_header, strip_bullet
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary
from resume_parser_ai.rules.section_segmenter import SectionIndex
from resume_parser_ai.schemas.resume import (
    TECHNICAL_SKILLS_CATEGORY,
    Certification,
    Language,
    Project,
    SkillGroup,
)

SUMMARY_MAX_LINES = 3


def extract_summary(lines: Sequence[str], patterns: PatternLibrary = PATTERNS) -> Optional[str]:
    """
    Up to three lines after the first summary/profile/objective header, joined with spaces.
    Collection stops early at a section header; a header with no body is skipped.
    """
    for i, line in enumerate(lines):
        if not patterns.summary_header.match(line.strip()):
            continue
        collected: List[str] = []
        for following in lines[i + 1:i + 1 + SUMMARY_MAX_LINES]:
            if is_section_header(following, patterns):
                break
            collected.append(following.strip())
        if collected:
            return " ".join(collected).strip()
    return None


def extract_skills(sections: SectionIndex) -> List[SkillGroup]:
    """All tokens of the skills section (split on , ; |) in one "Technical Skills" group."""
    patterns = sections.patterns
    skills: List[str] = []
    for line in sections.section_lines("skills"):
        tokens = patterns.list_separator.split(strip_bullet(line, patterns))
        skills.extend(t.strip() for t in tokens if t.strip())
    if not skills:
        return []
    return [SkillGroup(category=TECHNICAL_SKILLS_CATEGORY, skills=skills)]


def extract_achievements(sections: SectionIndex) -> List[str]:
    patterns = sections.patterns
    achievements: List[str] = []
    for line in sections.section_lines("achievements"):
        text = strip_bullet(line, patterns)
        if text:
            achievements.append(text)
    return achievements


# Projects, certifications, languages and interests are not extracted by the
# rule-based parser yet; they keep the section interface and return nothing.

def extract_projects(sections: SectionIndex) -> List[Project]:
    return []


def extract_certifications(sections: SectionIndex) -> List[Certification]:
    return []


def extract_languages(sections: SectionIndex) -> List[Language]:
    return []


def extract_interests(sections: SectionIndex) -> List[str]:
    return []
