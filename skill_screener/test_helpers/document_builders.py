"""document_builders.py
Build in-memory resume documents (PDF, DOCX, TXT) to test extraction with.
"""
import io
from typing import List

from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

# Lines of a small resume used across tests
SAMPLE_RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com | Greater New York",
    "",
    "EXPERIENCE",
    "Data Engineer, Acme Corp",
    "Built Python ETL pipelines loading data into SQL warehouses.",
    "Maintained python tooling for analysts.",
    "",
    "SKILLS",
    "Python, SQL, Docker",
]


def build_txt_bytes(lines: List[str] = SAMPLE_RESUME_LINES) -> bytes:
    return "\n".join(lines).encode("utf-8")


def build_pdf_bytes(lines: List[str] = SAMPLE_RESUME_LINES, lines_per_page: int = 40) -> bytes:
    """Draw each line with reportlab, starting a new page every `lines_per_page` lines."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    _, height = letter

    y = height - 72
    for index, line in enumerate(lines):
        if index and index % lines_per_page == 0:
            pdf.showPage()
            y = height - 72
        if line:
            pdf.drawString(72, y, line)
        y -= 15

    pdf.save()
    return buffer.getvalue()


def build_docx_bytes(lines: List[str] = SAMPLE_RESUME_LINES) -> bytes:
    """Write each line as a paragraph with python-docx."""
    document = Document()
    for line in lines:
        document.add_paragraph(line)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
