"""Shared sample resume, in-memory DOCX/PDF builders and a canned LLM reply."""

from io import BytesIO

from docx import Document

SAMPLE_RESUME = """
Jane Doe
San Francisco, CA | jane.doe@example.com | +1 (415) 555-0134
linkedin.com/in/janedoe | github.com/janedoe | https://janedoe.dev

Summary
Backend engineer with eight years of experience building distributed systems.
Comfortable across Python, Go and cloud infrastructure.

Experience
Senior Software Engineer - Acme Inc Jan 2020 - Present
• Led migration of the billing platform to event sourcing
• Cut p99 latency by 40% across the payments API
Owned on-call rotation and incident reviews for the payments team
Software Engineer, Globex Corp, 2016 - 2019
- Built internal deployment tooling used by 30 teams

Education
Bachelor of Science, Stanford University 2012 - 2016
Major: Computer Science
GPA: 3.8/4.0

Skills
Go, Python; Docker
Kubernetes | PostgreSQL

Achievements
• Hackathon winner 2018
Speaker at PyCon 2019

Languages
English, Spanish
"""

LLM_REPLY = """```json
{
  "contact": {"name": "Jane Doe", "email": "jane.doe@example.com", "phone": null},
  "summary": "Backend engineer.",
  "experience": [
    {"company": "Acme Inc", "position": "Senior Software Engineer", "startDate": "01/2020",
     "endDate": "Present", "description": ["Led billing migration"], "current": true},
  ],
  "education": [{"institution": "Stanford University", "degree": "Bachelor", "field": "Computer Science"}],
  "skills": [{"category": "Programming Languages", "skills": ["Go", "Python"]}],
  "projects": null,
  "languages": [{"language": "English", "proficiency": "Native"}],
  "achievements": [],
  "interests": null
}
```"""


def make_docx(paragraphs, table_rows=()):
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table_rows:
        table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def make_pdf(lines):
    """Single-page PDF with one Helvetica text line per entry."""
    shown = " ".join(f"({line}) Tj T*" for line in lines)
    stream = f"BT /F1 12 Tf 72 720 Td 16 TL {shown} ET"
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        "/Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1")
    xref = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1")
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("latin-1")
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref}\n%%EOF\n".encode("latin-1")
    return out
