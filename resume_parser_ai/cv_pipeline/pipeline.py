"""Upload → text → parser pipeline used by the app."""

from typing import Optional

from resume_parser_ai.cv_pipeline.parser_strategy import ResumeParser, get_parser
from resume_parser_ai.cv_pipeline.text_extractor import extract_text_from_file
from resume_parser_ai.cv_pipeline.upload_validator import validate_upload
from resume_parser_ai.schemas.parse_outcome import ParseOutcome
from resume_parser_ai.utils.logger import get_logger

logger = get_logger(__name__)


def run_resume_pipeline(
    file_bytes: bytes,
    filename: str,
    mode: str,
    content_type: Optional[str] = None,
    parser: Optional[ResumeParser] = None,
) -> ParseOutcome:
    """
    Validate the upload, decode it to text, and parse it with the selected strategy.
    Validation and decoding failures come back as failed outcomes with zero processing time.
    """
    parser = parser or get_parser(mode)

    error = validate_upload(filename, len(file_bytes or b""), content_type)
    if error:
        logger.warning("Upload rejected (%s): %s", filename, error)
        return ParseOutcome.failed(error, parser.method)

    text = extract_text_from_file(file_bytes, filename)
    if not text:
        return ParseOutcome.failed(
            f"Could not extract text from {filename}. The file may be empty, image-only or corrupted.",
            parser.method,
        )

    logger.info("Parsing %s with %s parser", filename, parser.method)
    return parser.parse(text)
