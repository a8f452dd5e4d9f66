"""Schema exports."""

from .parse_outcome import ParseMethod, ParseOutcome
from .resume import (
    UNKNOWN_DEGREE,
    UNKNOWN_INSTITUTION,
    Certification,
    ContactInfo,
    DateSpan,
    EducationEntry,
    ExperienceEntry,
    Language,
    ParsedResume,
    Project,
    SkillGroup,
)

__all__ = [
    "ContactInfo",
    "DateSpan",
    "ExperienceEntry",
    "EducationEntry",
    "SkillGroup",
    "Project",
    "Certification",
    "Language",
    "ParsedResume",
    "ParseMethod",
    "ParseOutcome",
    "UNKNOWN_DEGREE",
    "UNKNOWN_INSTITUTION",
]
