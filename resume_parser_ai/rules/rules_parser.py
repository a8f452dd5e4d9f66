"""Rule-based resume parser: runs every extractor over one document and wraps the result."""

import time

from resume_parser_ai.rules.contact_extractor import extract_contact
from resume_parser_ai.rules.education_extractor import extract_education
from resume_parser_ai.rules.experience_extractor import extract_experience
from resume_parser_ai.rules.patterns import PATTERNS, PatternLibrary
from resume_parser_ai.rules.section_extractors import (
    extract_achievements,
    extract_certifications,
    extract_interests,
    extract_languages,
    extract_projects,
    extract_skills,
    extract_summary,
)
from resume_parser_ai.rules.section_segmenter import SectionIndex
from resume_parser_ai.schemas.parse_outcome import ParseOutcome
from resume_parser_ai.schemas.resume import ParsedResume
from resume_parser_ai.utils.logger import get_logger
from resume_parser_ai.utils.text import normalize_text, split_lines

logger = get_logger(__name__)

METHOD = "rules"


def _elapsed_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def extract_resume(resume_text: str, patterns: PatternLibrary = PATTERNS) -> ParsedResume:
    """Build a ParsedResume from plain text. Not-found fields stay None / empty."""
    normalized = normalize_text(resume_text)
    lines = split_lines(resume_text)
    sections = SectionIndex(lines, patterns)

    return ParsedResume(
        contact=extract_contact(normalized, lines, patterns),
        summary=extract_summary(lines, patterns),
        experience=extract_experience(sections),
        education=extract_education(sections),
        skills=extract_skills(sections),
        projects=extract_projects(sections),
        certifications=extract_certifications(sections),
        languages=extract_languages(sections),
        achievements=extract_achievements(sections),
        interests=extract_interests(sections),
    )


def parse_resume_with_rules(resume_text: str) -> ParseOutcome:
    """
    Parse resume text with the rule-based pipeline.

    Never raises: an unexpected fault (e.g. a non-string input) becomes a failed
    outcome. Elapsed time is measured in both cases.
    """
    start = time.perf_counter()
    try:
        resume = extract_resume(resume_text)
    except Exception as e:
        logger.exception("Rules parsing error: %s", e)
        return ParseOutcome.failed(
            error=str(e) or "Unknown error occurred",
            method=METHOD,
            processing_time=_elapsed_ms(start),
        )

    elapsed = _elapsed_ms(start)
    logger.info(
        "Rules parse done in %d ms: %d experience, %d education, %d skill groups",
        elapsed,
        len(resume.experience),
        len(resume.education),
        len(resume.skills),
    )
    return ParseOutcome.succeeded(data=resume, method=METHOD, processing_time=elapsed)
