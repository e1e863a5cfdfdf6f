"""text_extractor.py
Selects a DocumentRenderer for each document and converts its text into a
StructuredText.
"""
import os
from typing import Dict, Optional, Type

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.exceptions import ExtractionError
from skill_screener.models import StructuredText

from skill_screener.screen_classes.text_extractor.document_renderer import DocumentRenderer
from skill_screener.screen_classes.text_extractor.pdf_renderer import PDFRenderer
from skill_screener.screen_classes.text_extractor.word_document_renderer import WordDocumentRenderer
from skill_screener.screen_classes.text_extractor.plain_text_renderer import PlainTextRenderer
from skill_screener.screen_classes.text_extractor.helpers.check_file_extension import check_file_extension
from skill_screener.screen_classes.text_extractor.helpers.build_structured_text import build_structured_text


class TextExtractor:
    """
    Converts raw document bytes into a line-addressable ``StructuredText``.

    The renderer is picked from the file name's extension using
    ``FILETYPE_RENDERER_MAP``. A document with no file name, or a name without
    an extension, is rendered with ``DEFAULT_RENDERER`` (PDF). Passing
    `renderer` bypasses that lookup and renders every document with the given
    instance, which is how alternate document formats are plugged in.

    Args:
        lines_per_page (int): Lines per estimated page. Defaults to
            ``SCREENER_DEFAULTS.LINES_PER_PAGE``.
        max_file_size_mb (float | None): Maximum document size handed to renderers.
        renderer (DocumentRenderer | None): Optional renderer used for all documents.

    Example:
        >>> extractor = TextExtractor()
        >>> structured_text = extractor.extract(pdf_bytes, "resume.pdf")
        >>> structured_text.total_lines
        42
    """

    FILETYPE_RENDERER_MAP: Dict[str, Type[DocumentRenderer]] = {
        ".pdf": PDFRenderer,
        ".docx": WordDocumentRenderer,
        ".txt": PlainTextRenderer,
    }
    DEFAULT_RENDERER: Type[DocumentRenderer] = PDFRenderer

    def __init__(
        self,
        lines_per_page: int = SCREENER_DEFAULTS.LINES_PER_PAGE,
        max_file_size_mb: Optional[float] = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB,
        renderer: Optional[DocumentRenderer] = None,
    ):
        if renderer is not None and not isinstance(renderer, DocumentRenderer):
            raise TypeError("Provided renderer must be an instance of DocumentRenderer.")

        self.lines_per_page = lines_per_page
        self.max_file_size_mb = max_file_size_mb
        self.renderer = renderer

    def extract(self, document_bytes: bytes, file_name: Optional[str] = None) -> StructuredText:
        """
        Render a document to plain text and index it by line.

        Args:
            document_bytes (bytes): Raw document content.
            file_name (str | None): Original file name; selects the renderer
                unless one was injected.

        Returns:
            StructuredText: The document's text split into numbered lines.

        Raises:
            ExtractionError: If the document cannot be rendered, including
                ``FileNotSupportedError`` and ``FileTooLargeError``.
        """
        if not isinstance(document_bytes, (bytes, bytearray)):
            raise ExtractionError(
                file_name=file_name,
                message=(
                    f"Document content for `{file_name}` must be bytes "
                    f"(got {type(document_bytes).__name__})."
                ),
            )

        renderer = self._get_renderer(file_name)
        full_text = renderer.render(bytes(document_bytes), file_name)

        return build_structured_text(full_text, lines_per_page=self.lines_per_page)

    def _get_renderer(self, file_name: Optional[str]) -> DocumentRenderer:
        """
        Return the injected renderer or the one registered for the file extension.

        Raises:
            FileNotSupportedError: From check_file_extension if the file name has an
                extension that is not in self.FILETYPE_RENDERER_MAP
        """
        if self.renderer is not None:
            return self.renderer

        # Uploads without a usable name are treated as PDF
        if not os.path.splitext(os.path.basename(file_name or ""))[1]:
            return self.DEFAULT_RENDERER(max_file_size_mb=self.max_file_size_mb)

        ext = check_file_extension(
            file_name=file_name,
            supported_extensions=self.FILETYPE_RENDERER_MAP.keys(),
        )
        renderer_class = self.FILETYPE_RENDERER_MAP[ext]
        return renderer_class(max_file_size_mb=self.max_file_size_mb)
