"""pdf_renderer.py

Holds PDFRenderer class.
"""
from typing import Optional

import pymupdf

from skill_screener.exceptions import ExtractionError
from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer

class PDFRenderer(DocumentRenderer):
    """
    Concrete renderer for PDF documents (.pdf).

    Uses PyMuPDF to open the document from memory and concatenates the text
    of every page in page order.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): List of file extensions supported by
            this renderer (only ``.pdf``).
    """
    SUPPORTED_EXTENSIONS = ['.pdf']

    def _render_text(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        """
        Opens the PDF using PyMuPDF, combines any pages, and returns its
        contents as a string.

        Raises:
            ExtractionError: If the PDF cannot be opened or read.
        """
        try:
            doc = pymupdf.open(stream=document_bytes, filetype="pdf")
        except Exception as e:
            raise ExtractionError(file_name=file_name, original_error=str(e))

        try:
            full_text = "".join(
                doc.load_page(page_number).get_text("text")
                for page_number in range(doc.page_count)
            )
        except Exception as e:
            raise ExtractionError(file_name=file_name, original_error=str(e))
        finally:
            doc.close()

        return full_text
