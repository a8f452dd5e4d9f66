"""Result envelope returned by every parsing strategy."""

from typing import Literal, Optional

from pydantic import Field, model_validator

from resume_parser_ai.schemas.resume import ParsedResume, ResumeModel

ParseMethod = Literal["rules", "llm"]


class ParseOutcome(ResumeModel):
    """Success carries data; failure carries an error message. Both carry method and timing."""

    success: bool = Field(..., description="True if a ParsedResume was produced")
    data: Optional[ParsedResume] = Field(default=None, description="Parsed record (success only)")
    error: Optional[str] = Field(default=None, description="Human-readable error (failure only)")
    method: ParseMethod = Field(..., description="Which strategy produced this outcome")
    processing_time: int = Field(default=0, description="Elapsed wall-clock time in milliseconds")

    @model_validator(mode="after")
    def _check_tag(self) -> "ParseOutcome":
        if self.success and self.data is None:
            raise ValueError("successful outcome requires data")
        if not self.success and self.error is None:
            raise ValueError("failed outcome requires an error message")
        return self

    @classmethod
    def succeeded(cls, data: ParsedResume, method: ParseMethod, processing_time: int) -> "ParseOutcome":
        return cls(success=True, data=data, method=method, processing_time=processing_time)

    @classmethod
    def failed(cls, error: str, method: ParseMethod, processing_time: int = 0) -> "ParseOutcome":
        return cls(success=False, error=error, method=method, processing_time=processing_time)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize with camelCase keys; absent fields are omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
