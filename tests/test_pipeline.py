import pytest

from resume_parser_ai.cv_pipeline import LLMResumeParser, RulesResumeParser, get_parser, run_resume_pipeline
from tests.helpers import LLM_REPLY, SAMPLE_RESUME, make_docx


def _sample_docx():
    return make_docx([line for line in SAMPLE_RESUME.splitlines() if line.strip()])


def test_get_parser_modes():
    assert isinstance(get_parser("rules"), RulesResumeParser)
    assert isinstance(get_parser(" LLM "), LLMResumeParser)
    assert get_parser("rules").method == "rules"


@pytest.mark.parametrize("mode", ["", "regex", None])
def test_get_parser_rejects_unknown_modes(mode):
    with pytest.raises(ValueError):
        get_parser(mode)


def test_docx_through_rules_parser():
    outcome = run_resume_pipeline(_sample_docx(), "jane.docx", "rules")
    assert outcome.success is True
    assert outcome.method == "rules"
    assert outcome.data.contact.email == "jane.doe@example.com"
    assert [job.company for job in outcome.data.experience] == ["Acme Inc", "Globex Corp"]


def test_rejected_upload_is_not_parsed():
    outcome = run_resume_pipeline(b"Jane Doe", "resume.txt", "rules")
    assert outcome.success is False
    assert outcome.error == "Please upload a PDF or DOCX file."
    assert outcome.processing_time == 0


def test_unreadable_upload():
    outcome = run_resume_pipeline(b"garbage bytes", "resume.pdf", "llm")
    assert outcome.success is False
    assert outcome.method == "llm"
    assert outcome.error.startswith("Could not extract text from resume.pdf")


def test_llm_mode_with_injected_client(fake_llm_client):
    client = fake_llm_client(content=LLM_REPLY)
    outcome = run_resume_pipeline(_sample_docx(), "jane.docx", "llm", parser=LLMResumeParser(client=client))
    assert outcome.success is True
    assert outcome.method == "llm"
    assert outcome.data.experience[0].company == "Acme Inc"
    assert "Jane Doe" in client.completions.calls[0]["messages"][1]["content"]
