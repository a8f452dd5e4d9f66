from resume_parser_ai.rules.experience_extractor import extract_date_span, extract_experience, parse_job_line
from resume_parser_ai.rules.section_segmenter import SectionIndex
from resume_parser_ai.utils.text import split_lines


def _experience(text):
    return extract_experience(SectionIndex(split_lines(text)))


def test_parse_job_line_with_present():
    draft = parse_job_line("Senior Engineer - Acme Inc Jan 2020 - Present")
    entry = draft.to_entry()
    assert entry.position == "Senior Engineer"
    assert entry.company == "Acme Inc"
    assert entry.start_date == "Jan 2020"
    assert entry.end_date == "Present"
    assert entry.current is True


def test_parse_job_line_third_part_is_location():
    entry = parse_job_line("Engineer - Acme Inc - Berlin 2018 - 2020").to_entry()
    assert (entry.position, entry.company, entry.location) == ("Engineer", "Acme Inc", "Berlin")
    assert (entry.start_date, entry.end_date) == ("2018", "2020")
    assert entry.current is False


def test_parse_job_line_without_separator():
    draft = parse_job_line("Lead Developer 2019 - 2021")
    assert draft.position == "Lead Developer"
    assert draft.company == ""
    assert not draft.is_complete()


def test_parse_job_line_pipe_and_parentheses():
    entry = parse_job_line("Data Analyst | Initech LLC (03/2015 – 12/2017)").to_entry()
    assert entry.position == "Data Analyst"
    assert entry.company == "Initech LLC"
    assert (entry.start_date, entry.end_date) == ("03/2015", "12/2017")


def test_date_span_absent():
    span = extract_date_span("Senior Engineer at Acme")
    assert span.start_date is None and span.end_date is None
    assert span.current is False


def test_sample_experience(sample_resume):
    jobs = _experience(sample_resume)
    assert len(jobs) == 2

    first, second = jobs
    assert first.position == "Senior Software Engineer"
    assert first.company == "Acme Inc"
    assert first.current is True
    assert first.description == [
        "Led migration of the billing platform to event sourcing",
        "Cut p99 latency by 40% across the payments API",
        "Owned on-call rotation and incident reviews for the payments team",
    ]

    assert second.position == "Software Engineer"
    assert second.company == "Globex Corp"
    assert (second.start_date, second.end_date) == ("2016", "2019")
    assert second.current is False
    assert second.description == ["Built internal deployment tooling used by 30 teams"]


def test_one_entry_per_job_title_line():
    text = """Experience
    Backend Developer - Initech LLC 2019 - 2021
    - Wrote services
    Data Analyst - Hooli Group 2017 - 2019
    QA Engineer - Pied Piper Inc 2015 - 2017
    * Automated regression suite
    """
    jobs = _experience(text)
    assert [j.company for j in jobs] == ["Initech LLC", "Hooli Group", "Pied Piper Inc"]
    assert all(j.position and j.company for j in jobs)
    assert jobs[1].description is None


def test_incomplete_entries_are_dropped():
    text = "Experience\nLead Developer 2019 - 2021\n• Built things for customers"
    assert _experience(text) == []


def test_short_non_bullet_lines_are_noise():
    text = "Experience\nEngineer - Acme Inc 2018 - 2020\nRemote\n• Shipped the mobile app"
    jobs = _experience(text)
    assert jobs[0].description == ["Shipped the mobile app"]


def test_bullets_before_first_job_are_ignored():
    text = "Experience\n• Orphan bullet text\nEngineer - Acme Inc 2018 - 2020"
    jobs = _experience(text)
    assert len(jobs) == 1
    assert jobs[0].description is None


def test_experience_stops_at_next_header():
    text = "Experience\nEngineer - Acme Inc 2018 - 2020\nSkills\nManager - Umbrella Corp 2010 - 2012"
    jobs = _experience(text)
    assert [j.company for j in jobs] == ["Acme Inc"]


def test_no_experience_section():
    assert _experience("Jane Doe\nSkills\nPython") == []


def test_date_range_after_trailing_separator():
    entry = parse_job_line("Senior Engineer - Acme Inc - Jan 2020 - Present").to_entry()
    assert entry.position == "Senior Engineer"
    assert entry.company == "Acme Inc"
    assert entry.location is None
    assert (entry.start_date, entry.end_date) == ("Jan 2020", "Present")

    entry = parse_job_line("Data Analyst, Initech LLC, 05/2019 – 12/2021").to_entry()
    assert (entry.position, entry.company) == ("Data Analyst", "Initech LLC")


def test_qualified_experience_header():
    text = """Skills
    Python, Go
    Work Experience & Internships
    Backend Intern - Hooli Group - Jun 2019 - Aug 2019
    • Wrote the billing exporter
    """
    sections = SectionIndex(split_lines(text))
    jobs = extract_experience(sections)
    assert [(j.position, j.company) for j in jobs] == [("Backend Intern", "Hooli Group")]
    assert sections.section_lines("skills") == ["Python, Go"]
