"""Extract raw text from uploaded resume files (PDF, DOCX). In-memory only."""

from io import BytesIO
from pathlib import PurePath
from typing import Optional

import pdfplumber
from docx import Document

from resume_parser_ai.config import MAX_CV_TEXT_CHARS
from resume_parser_ai.utils.logger import get_logger
from resume_parser_ai.utils.text import clean_cv_text

logger = get_logger(__name__)


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    """Page texts joined by blank lines; None if the PDF has no text layer or cannot be read."""
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = []
            for page in pdf.pages:
                ptext = page.extract_text()
                if ptext:
                    parts.append(ptext)
            return "\n\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("PDF extraction failed: %s", e)
        return None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    """Paragraph texts plus table cell texts, one per line."""
    try:
        doc = Document(bytes_io)
        parts = [p.text for p in doc.paragraphs if p.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                cells = [c.text.strip() for c in row.cells if c.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))
        return "\n".join(parts) if parts else None
    except Exception as e:
        logger.exception("DOCX extraction failed: %s", e)
        return None


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean text from an uploaded resume (PDF or DOCX).
    Returns None for unsupported types, unreadable files, or files with no text.
    """
    suffix = PurePath((filename or "").strip().lower()).suffix
    if suffix not in (".pdf", ".docx"):
        logger.warning("Unsupported file type: %s", filename)
        return None

    bio = BytesIO(file_bytes)
    raw = _extract_pdf(bio) if suffix == ".pdf" else _extract_docx(bio)
    if not raw or not raw.strip():
        logger.warning("No text extracted from %s (empty or image-only document)", filename)
        return None

    text = clean_cv_text(raw, MAX_CV_TEXT_CHARS)
    logger.info("Extracted %d characters from %s", len(text), filename)
    return text
