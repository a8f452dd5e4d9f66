"""Resume upload pipeline: validation, text extraction (PDF/DOCX), rule-based or LLM parsing."""

from .llm_parser import clean_llm_json, parse_resume_with_llm
from .parser_strategy import LLMResumeParser, ResumeParser, RulesResumeParser, get_parser
from .pipeline import run_resume_pipeline
from .text_extractor import extract_text_from_file
from .upload_validator import validate_upload

__all__ = [
    "run_resume_pipeline",
    "extract_text_from_file",
    "validate_upload",
    "parse_resume_with_llm",
    "clean_llm_json",
    "ResumeParser",
    "RulesResumeParser",
    "LLMResumeParser",
    "get_parser",
]
