"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# OpenAI – never hardcode keys
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# Azure OpenAI (used instead of OpenAI when endpoint + key are set)
AZURE_OPENAI_API_KEY: str = os.getenv("AZURE_OPENAI_API_KEY", "")
AZURE_OPENAI_ENDPOINT: str = os.getenv("AZURE_OPENAI_ENDPOINT", "")
AZURE_OPENAI_DEPLOYMENT: str = os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4")
AZURE_OPENAI_API_VERSION: str = os.getenv("AZURE_OPENAI_API_VERSION", "2024-02-15-preview")

# LLM request settings
LLM_TEMPERATURE: float = 0.1
LLM_TOP_P: float = 0.95
LLM_MAX_TOKENS: int = 3000
LLM_MAX_INPUT_CHARS: int = 12000

# Upload limits
MAX_FILE_SIZE_BYTES: int = 10 * 1024 * 1024
MAX_CV_TEXT_CHARS: int = 50000

# Supported uploads: extension -> MIME type
SUPPORTED_FILE_TYPES: dict = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

# Parsing modes (labels shown in the UI)
PARSING_MODES: dict = {
    "rules": "Rule-based (offline)",
    "llm": "LLM (OpenAI)",
}
DEFAULT_PARSING_MODE: str = "rules"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def azure_configured() -> bool:
    """True when Azure OpenAI credentials are available."""
    return bool(AZURE_OPENAI_API_KEY and AZURE_OPENAI_ENDPOINT)


def llm_configured() -> bool:
    """True when any LLM backend (Azure or OpenAI) has credentials."""
    return azure_configured() or bool(OPENAI_API_KEY)
