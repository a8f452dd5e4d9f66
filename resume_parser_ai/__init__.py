"""Resume Parser AI: rule-based and LLM resume extraction."""

from resume_parser_ai.rules.rules_parser import parse_resume_with_rules
from resume_parser_ai.schemas.parse_outcome import ParseOutcome
from resume_parser_ai.schemas.resume import ParsedResume

__all__ = ["parse_resume_with_rules", "ParseOutcome", "ParsedResume"]
