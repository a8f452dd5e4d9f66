"""Structured resume record produced by the rule-based and LLM parsers."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

UNKNOWN_INSTITUTION = "Unknown Institution"
UNKNOWN_DEGREE = "Unknown Degree"
TECHNICAL_SKILLS_CATEGORY = "Technical Skills"


class ResumeModel(BaseModel):
    """Base for resume models: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContactInfo(ResumeModel):
    """Contact block; every field is None when not found."""

    name: Optional[str] = Field(default=None, description="Candidate full name")
    email: Optional[str] = Field(default=None, description="First email address in the text")
    phone: Optional[str] = Field(default=None, description="Phone number as written")
    location: Optional[str] = Field(default=None, description="City, region")
    linkedin: Optional[str] = Field(default=None, description="Canonical LinkedIn profile URL")
    github: Optional[str] = Field(default=None, description="Canonical GitHub profile URL")
    website: Optional[str] = Field(default=None, description="Personal website or portfolio URL")


class DateSpan(ResumeModel):
    """Free-form start/end dates ("Jan 2020", "05/2019", "Present")."""

    start_date: Optional[str] = Field(default=None, description="Start date as written")
    end_date: Optional[str] = Field(default=None, description="End date as written")

    @property
    def current(self) -> bool:
        end = (self.end_date or "").lower()
        return "present" in end or "current" in end


class ExperienceEntry(ResumeModel):
    """One job."""

    company: str = Field(default="", description="Employer name")
    position: str = Field(default="", description="Job title")
    start_date: Optional[str] = Field(default=None, description="Start date as written")
    end_date: Optional[str] = Field(default=None, description="End date as written")
    location: Optional[str] = Field(default=None, description="Job location")
    description: Optional[List[str]] = Field(default=None, description="Description bullets; None when empty")
    current: bool = Field(default=False, description="True if the end date says Present/Current")

    @field_validator("company", "position", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description_to_none(cls, v: Any) -> Any:
        return v or None

    @field_validator("current", mode="before")
    @classmethod
    def _none_to_false(cls, v: Any) -> Any:
        return False if v is None else v


class EducationEntry(ResumeModel):
    """One degree or school attended."""

    institution: str = Field(default=UNKNOWN_INSTITUTION, description="School, college or university")
    degree: str = Field(default=UNKNOWN_DEGREE, description="Degree keyword (Bachelor, MBA, ...)")
    field: Optional[str] = Field(default=None, description="Field of study")
    start_date: Optional[str] = Field(default=None, description="Start date as written")
    end_date: Optional[str] = Field(default=None, description="End date as written")
    gpa: Optional[str] = Field(default=None, description="GPA as written, e.g. 3.8/4")
    location: Optional[str] = Field(default=None, description="Campus location")

    @field_validator("institution", mode="before")
    @classmethod
    def _default_institution(cls, v: Any) -> Any:
        return v or UNKNOWN_INSTITUTION

    @field_validator("degree", mode="before")
    @classmethod
    def _default_degree(cls, v: Any) -> Any:
        return v or UNKNOWN_DEGREE


class SkillGroup(ResumeModel):
    """Skills under one category label, in order of appearance."""

    category: str = Field(default=TECHNICAL_SKILLS_CATEGORY, description="Category label")
    skills: List[str] = Field(default_factory=list, description="Skill names; duplicates allowed")

    @field_validator("skills", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class Project(ResumeModel):
    name: str = Field(default="", description="Project name")
    description: Optional[str] = Field(default=None, description="Short description")
    technologies: Optional[List[str]] = Field(default=None, description="Technologies used")
    url: Optional[str] = Field(default=None, description="Project link")
    start_date: Optional[str] = Field(default=None, description="Start date as written")
    end_date: Optional[str] = Field(default=None, description="End date as written")

    @field_validator("name", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Certification(ResumeModel):
    name: str = Field(default="", description="Certification name")
    issuer: str = Field(default="", description="Issuing organization")
    date: Optional[str] = Field(default=None, description="Issue date")
    expiry_date: Optional[str] = Field(default=None, description="Expiry date")
    credential_id: Optional[str] = Field(default=None, description="Credential identifier")

    @field_validator("name", "issuer", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Language(ResumeModel):
    language: str = Field(default="", description="Language name")
    proficiency: str = Field(default="", description="Proficiency level")

    @field_validator("language", "proficiency", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


_SEQUENCE_FIELDS = (
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "achievements",
    "interests",
)


class ParsedResume(ResumeModel):
    """Aggregate record for one document. Rebuilt from scratch on every parse."""

    contact: ContactInfo = Field(default_factory=ContactInfo, description="Contact details")
    summary: Optional[str] = Field(default=None, description="Profile / objective text")
    experience: List[ExperienceEntry] = Field(default_factory=list, description="Work history, in order")
    education: List[EducationEntry] = Field(default_factory=list, description="Education, in order")
    skills: List[SkillGroup] = Field(default_factory=list, description="Skill groups")
    projects: List[Project] = Field(default_factory=list, description="Projects")
    certifications: List[Certification] = Field(default_factory=list, description="Certifications")
    languages: List[Language] = Field(default_factory=list, description="Spoken languages")
    achievements: List[str] = Field(default_factory=list, description="Achievements and awards")
    interests: List[str] = Field(default_factory=list, description="Interests and hobbies")

    @model_validator(mode="before")
    @classmethod
    def _drop_null_collections(cls, data: Any) -> Any:
        # LLM replies use null for missing sections; fall back to the defaults.
        if isinstance(data, dict):
            data = {
                k: v for k, v in data.items()
                if not (v is None and (k == "contact" or k in _SEQUENCE_FIELDS))
            }
        return data
