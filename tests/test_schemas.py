import pytest
from pydantic import ValidationError

from resume_parser_ai.schemas import (
    UNKNOWN_DEGREE,
    UNKNOWN_INSTITUTION,
    DateSpan,
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ParseOutcome,
)


def test_date_span_current():
    assert DateSpan(start_date="2020", end_date="Present").current
    assert DateSpan(end_date="currently employed").current
    assert not DateSpan(end_date="2021").current
    assert not DateSpan().current


def test_experience_entry_normalizes_nulls():
    job = ExperienceEntry.model_validate(
        {"company": None, "position": "Engineer", "description": [], "current": None}
    )
    assert job.company == ""
    assert job.description is None
    assert job.current is False


def test_education_entry_placeholders():
    edu = EducationEntry(institution="", degree=None)
    assert edu.institution == UNKNOWN_INSTITUTION
    assert edu.degree == UNKNOWN_DEGREE


def test_parsed_resume_accepts_camel_case_and_nulls():
    resume = ParsedResume.model_validate(
        {
            "contact": None,
            "summary": None,
            "experience": [{"company": "Acme", "position": "Dev", "startDate": "2019", "endDate": "Present"}],
            "education": None,
            "skills": [{"category": "Languages", "skills": None}],
            "certifications": [{"name": "CKA", "issuer": "CNCF", "credentialId": "X-1"}],
            "interests": None,
        }
    )
    assert resume.contact.name is None
    assert resume.experience[0].start_date == "2019"
    assert resume.education == []
    assert resume.skills[0].skills == []
    assert resume.certifications[0].credential_id == "X-1"
    assert resume.interests == []


def test_outcome_requires_data_on_success():
    with pytest.raises(ValidationError):
        ParseOutcome(success=True, method="rules")
    with pytest.raises(ValidationError):
        ParseOutcome(success=False, method="llm")


def test_outcome_rejects_unknown_method():
    with pytest.raises(ValidationError):
        ParseOutcome.failed("boom", "regex")


def test_outcome_constructors():
    ok = ParseOutcome.succeeded(ParsedResume(), "llm", 12)
    assert ok.success and ok.data is not None and ok.processing_time == 12
    bad = ParseOutcome.failed("boom", "rules")
    assert not bad.success and bad.data is None and bad.processing_time == 0
    assert '"processingTime": 0' in bad.to_json()
