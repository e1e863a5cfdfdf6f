"""plain_text_renderer.py

Holds PlainTextRenderer class for UTF-8 text documents.
"""
from typing import Optional

from skill_screener.exceptions import ExtractionError
from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer


class PlainTextRenderer(DocumentRenderer):
    """Concrete renderer for plain text documents (.txt)."""

    SUPPORTED_EXTENSIONS = ['.txt']

    def __init__(self, max_file_size_mb: Optional[float] = None, encoding: str = "utf-8"):
        super().__init__(max_file_size_mb=max_file_size_mb)
        self.encoding = encoding

    def _render_text(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        try:
            return document_bytes.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(
                file_name=file_name,
                original_error=f"Unsupported encoding (expected {self.encoding}): {e}",
            )
