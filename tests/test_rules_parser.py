import json

import pytest

from resume_parser_ai import parse_resume_with_rules
from resume_parser_ai.rules.rules_parser import extract_resume


def test_sample_resume_end_to_end(sample_resume):
    outcome = parse_resume_with_rules(sample_resume)
    assert outcome.success is True
    assert outcome.method == "rules"
    assert outcome.error is None
    assert outcome.processing_time >= 0

    resume = outcome.data
    assert resume.contact.name == "Jane Doe"
    assert len(resume.experience) == 2
    assert len(resume.education) == 1
    assert resume.skills[0].skills[-1] == "PostgreSQL"
    assert resume.achievements == ["Hackathon winner 2018", "Speaker at PyCon 2019"]
    assert resume.projects == []
    assert resume.languages == []


@pytest.mark.parametrize("text", ["", "   \n\t  \n"])
def test_blank_input_is_an_empty_success(text):
    outcome = parse_resume_with_rules(text)
    assert outcome.success is True
    resume = outcome.data
    assert resume.contact.name is None
    assert resume.contact.email is None
    assert resume.summary is None
    assert resume.experience == []
    assert resume.education == []
    assert resume.skills == []
    assert resume.achievements == []


def test_garbage_input_does_not_fail():
    outcome = parse_resume_with_rules("%%% ### ~~~ 12 34 ;;; ||| ??? !!!\n@@@ ^^^ *** ((( )))")
    assert outcome.success is True
    assert outcome.data.experience == []
    assert outcome.data.education == []


def test_non_string_input_becomes_failed_outcome():
    outcome = parse_resume_with_rules(None)
    assert outcome.success is False
    assert outcome.data is None
    assert outcome.error
    assert outcome.method == "rules"


def test_parsing_is_deterministic(sample_resume):
    first = extract_resume(sample_resume)
    second = extract_resume(sample_resume)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_extracted_entries_satisfy_invariants(sample_resume):
    resume = extract_resume(sample_resume)
    for job in resume.experience:
        assert job.position and job.company
        assert job.current == ("present" in (job.end_date or "").lower() or "current" in (job.end_date or "").lower())
        assert job.description is None or len(job.description) > 0
    for edu in resume.education:
        assert edu.institution and edu.degree


def test_to_json_uses_camel_case_keys(sample_resume):
    payload = json.loads(parse_resume_with_rules(sample_resume).to_json())
    assert payload["success"] is True
    assert payload["method"] == "rules"
    assert "processingTime" in payload
    assert "error" not in payload
    job = payload["data"]["experience"][0]
    assert job["startDate"] == "Jan 2020"
    assert job["endDate"] == "Present"
    assert "start_date" not in job
