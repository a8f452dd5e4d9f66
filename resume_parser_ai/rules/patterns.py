"""
Pattern library for the rule-based parser.

Every regex and keyword set used by the classifier and extractors lives here;
other modules reference them by attribute name only. All patterns are
case-insensitive. PATTERNS is built once at import and never mutated.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

_FLAGS = re.IGNORECASE

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
# Month name + year, MM/YYYY, or a bare 19xx/20xx year (tried in that order)
_DATE_TOKEN = rf"(?:\b{_MONTH}\.?\s+\d{{4}}\b|\b\d{{1,2}}/\d{{4}}\b|\b(?:19|20)\d{{2}}\b)"


# Short trailing qualifier: "& Internships", "and Qualifications", "/ Tools", " Details"
_HEADER_QUALIFIER = (
    r"(?:(?:\s*[&/]\s*|\s+and\s+)[A-Za-z][A-Za-z &/-]{0,29}"
    r"|\s+(?:details|summary|history|overview))"
)


def _header(*synonyms: str) -> Pattern[str]:
    """
    Whole-line header: one of the synonyms, an optional short qualifier, an
    optional colon. Nothing may follow the colon, so "Languages: Go, Python"
    stays content.
    """
    return re.compile(rf"^(?:{'|'.join(synonyms)}){_HEADER_QUALIFIER}?\s*:?$", _FLAGS)


# Fixed priority order; the first matching header wins.
SECTION_ORDER: Tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "achievements",
    "languages",
    "interests",
    "volunteering",
)


@dataclass(frozen=True)
class PatternLibrary:
    # ---- Contact ----
    email: Pattern[str] = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", _FLAGS)
    # Country-code prefixed forms first so the code is never cut off
    phone_patterns: Tuple[Pattern[str], ...] = (
        re.compile(r"\+91\s?\d{10}(?!\d)", _FLAGS),
        re.compile(r"\+\d{1,3}\s?\d{10}(?!\d)", _FLAGS),
        re.compile(r"\+\d{1,3}[\s.-]?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)", _FLAGS),
        re.compile(r"(?<!\d)\d\s\d{10}(?!\d)", _FLAGS),
        re.compile(r"(?<!\d)\d{10}(?!\d)", _FLAGS),
        re.compile(r"(?<![\d/])\(?\d{3}\)?[\s.-]\d{3}[\s.-]\d{4}(?!\d)", _FLAGS),
    )
    linkedin: Pattern[str] = re.compile(
        r"(?:linkedin\.com/in/|linkedin\.com/profile/view\?id=|/in/)([A-Za-z0-9-]+)", _FLAGS
    )
    github: Pattern[str] = re.compile(r"github\.com/([A-Za-z0-9-]+)", _FLAGS)
    website: Pattern[str] = re.compile(r"\b(?:https?://|www\.)[^\s,;|()<>]+", _FLAGS)
    name_line: Pattern[str] = re.compile(r"^[A-Za-z\s]{3,50}$", _FLAGS)
    location_segment: Pattern[str] = re.compile(
        r"^[A-Za-z][A-Za-z.' -]{1,40},\s*[A-Za-z][A-Za-z.' -]{1,40}$", _FLAGS
    )
    contact_separator: Pattern[str] = re.compile(r"\s*[|•·]\s*", _FLAGS)

    # ---- Dates ----
    date_token: Pattern[str] = re.compile(_DATE_TOKEN, _FLAGS)
    date_range: Pattern[str] = re.compile(
        rf"(?P<start>{_DATE_TOKEN})\s*[-–—]\s*(?P<end>{_DATE_TOKEN}|\bPresent\b|\bCurrent\b)", _FLAGS
    )
    year: Pattern[str] = re.compile(r"\b(?:19|20)\d{2}\b", _FLAGS)

    # ---- Keywords ----
    job_role: Pattern[str] = re.compile(
        r"\b(?:engineer|analyst|manager|developer|consultant|specialist|lead|director|senior|junior"
        r"|intern|architect|designer|scientist|programmer|administrator|coordinator|officer)\b",
        _FLAGS,
    )
    company_suffix: Pattern[str] = re.compile(
        r"\b(?:inc|ltd|corp|corporation|llc|llp|plc|gmbh|limited|company|technologies|systems"
        r"|solutions|group|labs)\b",
        _FLAGS,
    )
    institution: Pattern[str] = re.compile(
        r"\b(?:university|college|institute|school|academy|polytechnic)\b", _FLAGS
    )
    degree_keyword: Pattern[str] = re.compile(
        r"\b(?:fellowship|bachelor|master|phd|degree|btec|diploma)\b", _FLAGS
    )
    degree: Pattern[str] = re.compile(
        r"\b(fellowship|bachelor|master|doctorate|ph\.?d|b\.?tech|m\.?tech|b\.?sc|m\.?sc|b\.?e|b\.?s"
        r"|m\.?s|b\.?a|m\.?a|mba|btec|associate|diploma|certificate)\b",
        _FLAGS,
    )
    gpa: Pattern[str] = re.compile(r"\d\.\d{1,2}\s?/\s?\d(?:\.\d{1,2})?", _FLAGS)
    field_of_study: Pattern[str] = re.compile(
        r"\b(computer science|data science|information technology|software engineering"
        r"|electrical engineering|mechanical engineering|civil engineering|business administration"
        r"|engineering|mathematics|physics|chemistry|biology|economics|finance|business|science"
        r"|technology|management|arts|commerce)\b",
        _FLAGS,
    )

    # ---- Line structure ----
    bullet: Pattern[str] = re.compile(r"^[•\-*]\s*", _FLAGS)
    title_separator: Pattern[str] = re.compile(
        r"\s+-\s+|\s*[–—]\s*|\s*,\s*|\s+\|\s+|\s+@\s+|\s+at\s+", _FLAGS
    )
    institution_separator: Pattern[str] = re.compile(r"\s+-\s+|\s*[–—,|]\s*", _FLAGS)
    list_separator: Pattern[str] = re.compile(r"[,;|]", _FLAGS)

    # ---- Section headers ----
    summary_header: Pattern[str] = _header(
        r"(?:professional\s+|career\s+|executive\s+)?summary",
        r"(?:professional\s+|personal\s+|career\s+)?profile",
        r"(?:career\s+)?objective",
        r"overview",
        r"about(?:\s+me)?",
        r"bio",
    )
    section_headers: Tuple[Tuple[str, Pattern[str]], ...] = (
        ("experience", _header(
            r"(?:professional\s+|work\s+|relevant\s+|industry\s+)?experience",
            r"employment(?:\s+history)?",
            r"(?:work|career)\s+history",
            r"professional\s+background",
            r"internships?",
        )),
        ("education", _header(
            r"education(?:\s+(?:&|and)\s+training)?",
            r"(?:academic|educational)\s+(?:background|qualifications)",
        )),
        ("skills", _header(
            r"(?:technical\s+|core\s+|key\s+|professional\s+)?skills(?:\s+(?:&|and)\s+(?:tools|technologies|abilities))?",
            r"technical",
            r"(?:core\s+)?competencies",
            r"technologies",
            r"(?:areas\s+of\s+)?expertise",
        )),
        ("projects", _header(r"(?:personal\s+|academic\s+|key\s+|selected\s+|side\s+)?projects")),
        ("certifications", _header(
            r"certifications?",
            r"certificates?",
            r"licenses?(?:\s+(?:&|and)\s+certifications?)?",
        )),
        ("achievements", _header(
            r"achievements(?:\s+(?:&|and)\s+awards)?",
            r"awards(?:\s+(?:&|and)\s+(?:honors|honours|achievements))?",
            r"(?:honors|honours)(?:\s+(?:&|and)\s+awards)?",
            r"accomplishments",
        )),
        ("languages", _header(r"languages?", r"language\s+(?:skills|proficiency)")),
        ("interests", _header(
            r"(?:personal\s+)?interests(?:\s+(?:&|and)\s+hobbies)?",
            r"hobbies(?:\s+(?:&|and)\s+interests)?",
        )),
        ("volunteering", _header(
            r"volunteering",
            r"volunteer(?:\s+(?:work|experience))?",
            r"community\s+(?:service|involvement)",
        )),
    )

    def header_pattern(self, section: str) -> Pattern[str]:
        """Header pattern for a section name (including "summary"); KeyError if unknown."""
        if section == "summary":
            return self.summary_header
        for name, pattern in self.section_headers:
            if name == section:
                return pattern
        raise KeyError(section)


PATTERNS = PatternLibrary()
