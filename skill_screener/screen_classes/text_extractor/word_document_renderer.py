"""word_document_renderer.py

Holds WordDocumentRenderer class using python-docx for text extraction.
"""
import io
from typing import Optional

from docx import Document

from skill_screener.exceptions import ExtractionError
from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer


class WordDocumentRenderer(DocumentRenderer):
    """
    Concrete renderer for Microsoft Word documents (.docx).

    Uses ``python-docx`` to read the in-memory document. Every body paragraph
    becomes one line, blank paragraphs included, followed by the paragraphs
    of every table cell. Whitespace is left untouched so line positions match
    the document.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): File extensions supported by this renderer
            (only ``.docx``).
    """

    SUPPORTED_EXTENSIONS = ['.docx']

    def _render_text(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        """
        Raises:
            ExtractionError: If the Word document cannot be opened or read.
        """
        try:
            document = Document(io.BytesIO(document_bytes))
        except Exception as e:
            raise ExtractionError(file_name=file_name, original_error=str(e))

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                for cell in row.cells:
                    lines.extend(paragraph.text for paragraph in cell.paragraphs)

        return "\n".join(lines)
