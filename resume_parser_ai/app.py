"""
Resume Parser – Streamlit frontend.
No parsing logic in layout; validation, decoding and parsing live in cv_pipeline.
"""

from typing import List

import streamlit as st

from resume_parser_ai.config import (
    DEFAULT_PARSING_MODE,
    MAX_FILE_SIZE_BYTES,
    PARSING_MODES,
    llm_configured,
)
from resume_parser_ai.cv_pipeline.pipeline import run_resume_pipeline
from resume_parser_ai.schemas.parse_outcome import ParseOutcome
from resume_parser_ai.schemas.resume import EducationEntry, ExperienceEntry, ParsedResume

MODE_OPTIONS = list(PARSING_MODES.keys())


def _mode_label(key: str) -> str:
    return PARSING_MODES.get(key, key)


def _date_range(start: str, end: str) -> str:
    if start and end:
        return f"{start} – {end}"
    return start or end or ""


def _export_json(outcome: ParseOutcome) -> bytes:
    """Parsed record as camelCase JSON bytes."""
    if not outcome.data:
        return b"{}"
    return outcome.data.model_dump_json(by_alias=True, exclude_none=True, indent=2).encode("utf-8")


def _render_contact(resume: ParsedResume) -> None:
    c = resume.contact
    st.markdown(f"### {c.name or 'Unknown name'}")
    details: List[str] = [v for v in (c.email, c.phone, c.location) if v]
    if details:
        st.caption(" · ".join(details))
    for label, url in (("LinkedIn", c.linkedin), ("GitHub", c.github), ("Website", c.website)):
        if url:
            st.markdown(f"- **{label}:** {url}")


def _render_experience(entries: List[ExperienceEntry]) -> None:
    st.subheader(f"Experience ({len(entries)})")
    if not entries:
        st.caption("No experience section detected.")
    for job in entries:
        st.markdown(f"**{job.position}** · {job.company}")
        meta = _date_range(job.start_date or "", job.end_date or "")
        if job.location:
            meta = f"{meta} · {job.location}" if meta else job.location
        if meta:
            st.caption(meta + ("  (current)" if job.current else ""))
        for bullet in job.description or []:
            st.markdown(f"- {bullet}")


def _render_education(entries: List[EducationEntry]) -> None:
    st.subheader(f"Education ({len(entries)})")
    if not entries:
        st.caption("No education section detected.")
    for edu in entries:
        st.markdown(f"**{edu.degree}** · {edu.institution}")
        meta = [m for m in (edu.field, _date_range(edu.start_date or "", edu.end_date or ""), edu.gpa) if m]
        if meta:
            st.caption(" · ".join(meta))


def _render_lists(resume: ParsedResume) -> None:
    if resume.skills:
        st.subheader("Skills")
        for group in resume.skills:
            st.markdown(f"**{group.category}:** " + " ".join(f"`{s}`" for s in group.skills))
    if resume.achievements:
        st.subheader("Achievements")
        for item in resume.achievements:
            st.markdown(f"- {item}")
    if resume.projects:
        with st.expander(f"Projects ({len(resume.projects)})"):
            for p in resume.projects:
                st.markdown(f"- **{p.name}** {p.description or ''}")
    if resume.certifications:
        with st.expander(f"Certifications ({len(resume.certifications)})"):
            for cert in resume.certifications:
                st.markdown(f"- **{cert.name}** {cert.issuer}".rstrip())
    if resume.languages:
        with st.expander(f"Languages ({len(resume.languages)})"):
            for lang in resume.languages:
                st.markdown(f"- {lang.language} ({lang.proficiency or 'n/a'})")
    if resume.interests:
        st.caption("Interests: " + ", ".join(resume.interests))


def render_outcome(outcome: ParseOutcome) -> None:
    """Status line, rendered record and JSON download for one outcome."""
    status = f"Method: **{_mode_label(outcome.method)}** · Processing time: **{outcome.processing_time} ms**"
    if not outcome.success:
        st.error(outcome.error or "Parsing failed.")
        st.caption(status)
        return
    st.success("Resume parsed.")
    st.caption(status)

    resume = outcome.data
    _render_contact(resume)
    if resume.summary:
        st.markdown(f"> {resume.summary}")
    _render_experience(resume.experience)
    _render_education(resume.education)
    _render_lists(resume)

    st.download_button(
        "Download JSON",
        data=_export_json(outcome),
        file_name="parsed_resume.json",
        mime="application/json",
        key="download_json",
    )


def render_layout() -> None:
    """Streamlit page layout; parsing goes through run_resume_pipeline."""
    st.set_page_config(page_title="Resume Parser", layout="wide")
    st.title("Resume Parser")
    st.markdown("*Extract structured data from PDF or DOCX resumes with rules or an LLM.*")
    st.divider()

    if "outcome" not in st.session_state:
        st.session_state["outcome"] = None

    uploaded = st.file_uploader(
        "Upload resume",
        type=["pdf", "docx"],
        key="resume_file",
        help=f"PDF or DOCX, up to {MAX_FILE_SIZE_BYTES // (1024 * 1024)}MB.",
    )
    mode = st.radio(
        "Parsing mode",
        options=MODE_OPTIONS,
        index=MODE_OPTIONS.index(DEFAULT_PARSING_MODE),
        format_func=_mode_label,
        horizontal=True,
        key="parsing_mode",
    )
    parse_clicked = st.button("Parse resume", type="primary", disabled=uploaded is None, key="parse_btn")

    if parse_clicked and uploaded is not None:
        if mode == "llm" and not llm_configured():
            st.session_state["outcome"] = ParseOutcome.failed(
                "OPENAI_API_KEY is not set. Add it to your .env file.", "llm"
            )
        else:
            with st.spinner("Extracting text and parsing…"):
                st.session_state["outcome"] = run_resume_pipeline(
                    uploaded.getvalue(),
                    uploaded.name,
                    mode,
                    content_type=uploaded.type,
                )

    st.divider()
    outcome: ParseOutcome = st.session_state.get("outcome")
    if outcome is None:
        st.info("Upload a resume, choose a parsing mode, then click **Parse resume**.")
    else:
        render_outcome(outcome)


if __name__ == "__main__":
    render_layout()
