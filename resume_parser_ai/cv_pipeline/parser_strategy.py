"""Parsing strategies behind one interface, selected by parsing mode."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from openai import AsyncOpenAI

from resume_parser_ai.config import PARSING_MODES
from resume_parser_ai.cv_pipeline.llm_parser import parse_resume_with_llm
from resume_parser_ai.rules.rules_parser import parse_resume_with_rules
from resume_parser_ai.schemas.parse_outcome import ParseMethod, ParseOutcome


class ResumeParser(ABC):
    """Turns plain resume text into a ParseOutcome. Implementations never raise."""

    method: ParseMethod

    @abstractmethod
    def parse(self, resume_text: str) -> ParseOutcome:
        pass


class RulesResumeParser(ResumeParser):
    """Deterministic regex/heuristic extraction; no network, no configuration."""

    method: ParseMethod = "rules"

    def parse(self, resume_text: str) -> ParseOutcome:
        return parse_resume_with_rules(resume_text)


class LLMResumeParser(ResumeParser):
    """Chat-completion extraction via OpenAI or Azure OpenAI."""

    method: ParseMethod = "llm"

    def __init__(self, client: Optional[AsyncOpenAI] = None) -> None:
        self._client = client

    def parse(self, resume_text: str) -> ParseOutcome:
        return parse_resume_with_llm(resume_text, client=self._client)


_PARSERS: Dict[str, Type[ResumeParser]] = {
    "rules": RulesResumeParser,
    "llm": LLMResumeParser,
}


def get_parser(mode: str) -> ResumeParser:
    """Parser for a mode key from PARSING_MODES; ValueError for unknown modes."""
    key = (mode or "").strip().lower()
    if key not in PARSING_MODES or key not in _PARSERS:
        raise ValueError(f"Unknown parsing mode: {mode!r} (expected one of {sorted(PARSING_MODES)})")
    return _PARSERS[key]()
