"""test_renderers.py
Comprehensive test suite for:
  - DocumentRenderer (abstract base)
  - PDFRenderer
  - WordDocumentRenderer
  - PlainTextRenderer
"""
import io

import pytest
from docx import Document

from skill_screener.exceptions import ExtractionError, FileTooLargeError

from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer
from skill_screener.screen_classes.text_extractor.pdf_renderer import PDFRenderer
from skill_screener.screen_classes.text_extractor.word_document_renderer import WordDocumentRenderer
from skill_screener.screen_classes.text_extractor.plain_text_renderer import PlainTextRenderer
from skill_screener.screen_classes.text_extractor.helpers.build_structured_text import build_structured_text

from skill_screener.test_helpers.dummy_classes import DummyUpperCaseRenderer
from skill_screener.test_helpers.document_builders import (
    SAMPLE_RESUME_LINES,
    build_docx_bytes,
    build_pdf_bytes,
    build_txt_bytes,
)


class TestDocumentRenderer:
    """Unit tests for DocumentRenderer validation and abstract behavior."""

    def test_cannot_instantiate_directly(self):
        with pytest.raises(TypeError):
            DocumentRenderer()

    def test_file_too_large_error(self):
        renderer = DummyUpperCaseRenderer(max_file_size_mb=0.000001)
        with pytest.raises(FileTooLargeError) as exc_info:
            renderer.render(b"x" * 100, "big.dummy")

        assert exc_info.value.actual_size == 100
        assert exc_info.value.file_name == "big.dummy"

    def test_no_size_limit(self):
        renderer = DummyUpperCaseRenderer(max_file_size_mb=None)
        assert renderer.render(b"python" * 1000) == "PYTHON" * 1000

    def test_max_file_size_edge_cases(self):
        """Exactly the limit passes, one byte more fails."""
        size_mb = 3 / (1024 * 1024)
        renderer = DummyUpperCaseRenderer(max_file_size_mb=size_mb)

        assert renderer.render(b"abc") == "ABC"
        with pytest.raises(FileTooLargeError):
            renderer.render(b"abcd")


class TestPDFRenderer:
    """Tests for the PDFRenderer class."""

    def test_renders_every_line(self):
        text = PDFRenderer().render(build_pdf_bytes(), "resume.pdf")

        for line in SAMPLE_RESUME_LINES:
            if line:
                assert line in text

    def test_renders_all_pages_in_order(self):
        lines = [f"Line number {n}" for n in range(90)]
        text = PDFRenderer().render(build_pdf_bytes(lines, lines_per_page=40), "long.pdf")

        assert text.index("Line number 0") < text.index("Line number 45") < text.index("Line number 89")

    def test_corrupted_pdf_raises_extraction_error(self):
        with pytest.raises(ExtractionError) as exc_info:
            PDFRenderer().render(b"this is not a pdf", "corrupt.pdf")

        assert exc_info.value.file_name == "corrupt.pdf"
        assert "corrupt.pdf" in str(exc_info.value)

    def test_empty_bytes_raise_extraction_error(self):
        with pytest.raises(ExtractionError):
            PDFRenderer().render(b"", "empty.pdf")


class TestWordDocumentRenderer:
    """Tests for the WordDocumentRenderer class."""

    def test_renders_every_paragraph(self):
        text = WordDocumentRenderer().render(build_docx_bytes(), "resume.docx")

        for line in SAMPLE_RESUME_LINES:
            if line:
                assert line in text

    def test_blank_edge_paragraphs_are_kept(self):
        lines = ["", "", "Python developer", "", ""]
        text = WordDocumentRenderer().render(build_docx_bytes(lines), "resume.docx")

        assert text == "\n\nPython developer\n\n"
        assert build_structured_text(text) == build_structured_text(
            PlainTextRenderer().render(build_txt_bytes(lines), "resume.txt")
        )

    def test_line_count_matches_plain_text(self):
        docx_text = WordDocumentRenderer().render(build_docx_bytes(), "resume.docx")
        txt_text = PlainTextRenderer().render(build_txt_bytes(), "resume.txt")

        assert build_structured_text(docx_text).total_lines == build_structured_text(txt_text).total_lines

    def test_table_cells_are_rendered(self):
        document = Document()
        document.add_paragraph("SKILLS")
        table = document.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "Python"
        table.cell(0, 1).text = "SQL"
        buffer = io.BytesIO()
        document.save(buffer)

        text = WordDocumentRenderer().render(buffer.getvalue(), "resume.docx")
        assert text.split("\n") == ["SKILLS", "Python", "SQL"]

    def test_corrupted_docx_raises_extraction_error(self):
        with pytest.raises(ExtractionError):
            WordDocumentRenderer().render(b"not a zip archive", "corrupt.docx")


class TestPlainTextRenderer:
    """Tests for the PlainTextRenderer class."""

    def test_decodes_utf8(self):
        assert PlainTextRenderer().render("Zoë — Python".encode("utf-8")) == "Zoë — Python"

    def test_keeps_text_untouched(self):
        assert PlainTextRenderer().render(build_txt_bytes()) == "\n".join(SAMPLE_RESUME_LINES)

    def test_invalid_encoding_raises_extraction_error(self):
        with pytest.raises(ExtractionError) as exc_info:
            PlainTextRenderer().render(b"\xff\xfe\xfa python", "latin.txt")

        assert "encoding" in str(exc_info.value).lower()

    def test_custom_encoding(self):
        renderer = PlainTextRenderer(encoding="latin-1")
        assert renderer.render("café".encode("latin-1")) == "café"
