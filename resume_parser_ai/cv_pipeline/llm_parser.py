"""LLM-based resume parsing: chat completion, JSON sanitization, validation into ParsedResume."""

import asyncio
import json
import re
import time
from typing import Any, Optional

import openai
from openai import AsyncAzureOpenAI, AsyncOpenAI
from pydantic import ValidationError

from resume_parser_ai.config import (
    AZURE_OPENAI_API_KEY,
    AZURE_OPENAI_API_VERSION,
    AZURE_OPENAI_DEPLOYMENT,
    AZURE_OPENAI_ENDPOINT,
    LLM_MAX_INPUT_CHARS,
    LLM_MAX_TOKENS,
    LLM_TEMPERATURE,
    LLM_TOP_P,
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    azure_configured,
    llm_configured,
)
from resume_parser_ai.schemas.parse_outcome import ParseOutcome
from resume_parser_ai.schemas.resume import ParsedResume
from resume_parser_ai.utils.logger import get_logger

logger = get_logger(__name__)

METHOD = "llm"

RESUME_PARSING_SYSTEM_PROMPT = (
    "You are an expert resume parser that extracts structured information from resumes "
    "and returns valid JSON. Always return properly formatted JSON with no additional text."
)

RESUME_PARSING_PROMPT = """Extract the information below from the resume text and return a single JSON object
with exactly this structure (no markdown, no code block):
{
  "contact": {"name": "string", "email": "string", "phone": "string", "location": "string",
              "linkedin": "string", "github": "string", "website": "string"},
  "summary": "string",
  "experience": [{"company": "string", "position": "string", "startDate": "string", "endDate": "string",
                  "location": "string", "description": ["string"], "current": true}],
  "education": [{"institution": "string", "degree": "string", "field": "string", "startDate": "string",
                 "endDate": "string", "gpa": "string", "location": "string"}],
  "skills": [{"category": "string", "skills": ["string"]}],
  "projects": [{"name": "string", "description": "string", "technologies": ["string"], "url": "string",
                "startDate": "string", "endDate": "string"}],
  "certifications": [{"name": "string", "issuer": "string", "date": "string", "expiryDate": "string",
                      "credentialId": "string"}],
  "languages": [{"language": "string", "proficiency": "string"}],
  "achievements": ["string"],
  "interests": ["string"]
}
- Use null for missing fields and [] for missing lists.
- Write dates as "MM/YYYY" or "Month YYYY"; use "Present" for ongoing roles.
- Group skills into logical categories (e.g. "Programming Languages", "Frameworks", "Tools").
- Split job descriptions into bullet points.

Resume text:
"""

_FENCE_START_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_END_RE = re.compile(r"\s*```$")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_BARE_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_]\w*)(\s*:)")


def clean_llm_json(response: str) -> str:
    """
    Reduce an LLM reply to the JSON object it contains.
    Strips code fences and surrounding prose, flattens whitespace, drops trailing commas.
    """
    raw = (response or "").strip()
    if raw.startswith("```"):
        raw = _FENCE_START_RE.sub("", raw)
        raw = _FENCE_END_RE.sub("", raw)

    start, end = raw.find("{"), raw.rfind("}")
    if start != -1 and end > start:
        raw = raw[start:end + 1]

    raw = re.sub(r"\s+", " ", raw).strip()
    return _TRAILING_COMMA_RE.sub(r"\1", raw)


def loads_llm_json(response: str) -> Any:
    """Parse a sanitized reply; retries once with unquoted property names quoted."""
    cleaned = clean_llm_json(response)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        return json.loads(_BARE_KEY_RE.sub(r'\1"\2"\3', cleaned))


def _build_client() -> AsyncOpenAI:
    if azure_configured():
        return AsyncAzureOpenAI(
            api_key=AZURE_OPENAI_API_KEY,
            azure_endpoint=AZURE_OPENAI_ENDPOINT,
            api_version=AZURE_OPENAI_API_VERSION,
        )
    return AsyncOpenAI(api_key=OPENAI_API_KEY, base_url=OPENAI_BASE_URL or None)


def _model_name() -> str:
    return AZURE_OPENAI_DEPLOYMENT if azure_configured() else MODEL_NAME


def _elapsed_ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


async def _request_completion(client: AsyncOpenAI, resume_text: str) -> Optional[str]:
    content = resume_text[:LLM_MAX_INPUT_CHARS].strip()
    response = await client.chat.completions.create(
        model=_model_name(),
        messages=[
            {"role": "system", "content": RESUME_PARSING_SYSTEM_PROMPT},
            {"role": "user", "content": RESUME_PARSING_PROMPT + content},
        ],
        max_tokens=LLM_MAX_TOKENS,
        temperature=LLM_TEMPERATURE,
        top_p=LLM_TOP_P,
    )
    choice = response.choices[0] if response.choices else None
    if not choice or not choice.message or not choice.message.content:
        return None
    return choice.message.content


async def _parse_resume_async(client: AsyncOpenAI, resume_text: str, start: float) -> ParseOutcome:
    try:
        reply = await _request_completion(client, resume_text)
        if not reply:
            return ParseOutcome.failed("No response from the LLM service.", METHOD, _elapsed_ms(start))
        logger.debug("LLM reply: %d characters", len(reply))

        data = loads_llm_json(reply)
        if not isinstance(data, dict):
            return ParseOutcome.failed("LLM reply is not a JSON object.", METHOD, _elapsed_ms(start))
        resume = ParsedResume.model_validate(data)
    except openai.AuthenticationError as e:
        logger.warning("LLM authentication failed: %s", e)
        return ParseOutcome.failed(
            "Authentication error: invalid API key or credentials. Check your OpenAI configuration.",
            METHOD,
            _elapsed_ms(start),
        )
    except openai.RateLimitError as e:
        logger.warning("LLM rate limited: %s", e)
        return ParseOutcome.failed(
            "Rate limit exceeded: too many requests. Please wait a moment and try again.",
            METHOD,
            _elapsed_ms(start),
        )
    except openai.APIConnectionError as e:
        logger.warning("LLM connection failed: %s", e)
        return ParseOutcome.failed(
            "Connection error: unable to reach the LLM service. Check your network and try again.",
            METHOD,
            _elapsed_ms(start),
        )
    except json.JSONDecodeError as e:
        logger.warning("LLM returned malformed JSON: %s", e)
        return ParseOutcome.failed(
            f"LLM returned malformed JSON: {e}. The reply was probably truncated.",
            METHOD,
            _elapsed_ms(start),
        )
    except ValidationError as e:
        logger.warning("LLM reply failed validation: %s", e)
        return ParseOutcome.failed(
            f"LLM reply does not match the resume schema: {e.error_count()} error(s).",
            METHOD,
            _elapsed_ms(start),
        )
    except Exception as e:
        logger.exception("LLM parsing error: %s", e)
        return ParseOutcome.failed(f"LLM parsing failed: {e}", METHOD, _elapsed_ms(start))

    elapsed = _elapsed_ms(start)
    logger.info("LLM parse done in %d ms", elapsed)
    return ParseOutcome.succeeded(data=resume, method=METHOD, processing_time=elapsed)


def parse_resume_with_llm(resume_text: str, client: Optional[AsyncOpenAI] = None) -> ParseOutcome:
    """
    Parse resume text with an OpenAI-compatible chat model.
    Never raises; safe to call from sync context (e.g. Streamlit). A client may be
    injected; otherwise one is built from config and closed afterwards.
    """
    start = time.perf_counter()
    if not resume_text or not resume_text.strip():
        return ParseOutcome.failed("Resume text is empty.", METHOD, _elapsed_ms(start))
    owns_client = client is None
    if owns_client and not llm_configured():
        logger.error("No OpenAI/Azure OpenAI API key set; cannot run LLM parsing")
        return ParseOutcome.failed(
            "OPENAI_API_KEY is not set. Add it to your .env file or use the rule-based parser.",
            METHOD,
            _elapsed_ms(start),
        )

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        if owns_client:
            client = _build_client()
        return loop.run_until_complete(_parse_resume_async(client, resume_text, start))
    finally:
        if owns_client and client is not None:
            loop.run_until_complete(client.close())
        loop.close()
