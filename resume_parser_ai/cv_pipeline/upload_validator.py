"""Upload guard: file type and size checks before any decoding."""

from pathlib import PurePath
from typing import Optional

from resume_parser_ai.config import MAX_FILE_SIZE_BYTES, SUPPORTED_FILE_TYPES

# Some browsers report DOCX uploads without a specific MIME type
GENERIC_CONTENT_TYPE = "application/octet-stream"


def validate_upload(
    filename: str,
    size_bytes: int,
    content_type: Optional[str] = None,
) -> Optional[str]:
    """
    Return a user-facing error message, or None if the upload is acceptable.
    The extension decides the type; a browser-reported content type, when given,
    must agree with it.
    """
    suffix = PurePath((filename or "").strip().lower()).suffix
    if suffix not in SUPPORTED_FILE_TYPES:
        return "Please upload a PDF or DOCX file."
    if content_type and content_type not in (SUPPORTED_FILE_TYPES[suffix], GENERIC_CONTENT_TYPE):
        return f"File content type {content_type!r} does not match a {suffix} document."
    if size_bytes <= 0:
        return "The uploaded file is empty."
    if size_bytes > MAX_FILE_SIZE_BYTES:
        limit_mb = MAX_FILE_SIZE_BYTES // (1024 * 1024)
        return f"File size must be less than {limit_mb}MB."
    return None
