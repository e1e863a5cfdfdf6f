"""document_renderer.py

Holds abstract DocumentRenderer class inherited by format-specific renderers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from skill_screener.exceptions import FileTooLargeError

class DocumentRenderer(ABC):
    """
    Abstract base class for turning raw document bytes into plain text.

    All concrete renderers must implement the `render` method. Rendering is the
    only format-specific step of text extraction; everything downstream works on
    the returned string.

    Args:
        max_file_size_mb (float | None, optional): Maximum allowed document size in
            megabytes. If None, no size limit is enforced. Defaults to None.

    Attributes:
        max_file_size_mb (float | None): Maximum allowed document size.
    """
    # Extensions supported by a specific concrete class (to be overwritten by children)
    SUPPORTED_EXTENSIONS: List[str] = []

    def __init__(self, max_file_size_mb: Optional[float] = None):
        self.max_file_size_mb = max_file_size_mb

    def _validate_size(self, document_bytes: bytes, file_name: Optional[str] = None) -> None:
        """
        Raises:
            FileTooLargeError: Raised if the document exceeds max_file_size_mb
        """
        if self.max_file_size_mb is None:
            return

        # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
        max_size_bytes = self.max_file_size_mb * 1024 * 1024
        actual_size_bytes = len(document_bytes)
        if actual_size_bytes > max_size_bytes:
            raise FileTooLargeError(
                max_size=max_size_bytes,
                actual_size=actual_size_bytes,
                file_name=file_name,
            )

    def render(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        """
        Validate the document and return its full plain-text rendering.

        Args:
            document_bytes (bytes): Raw document content.
            file_name (str | None): Original file name, used in error messages.

        Returns:
            str: The document text, lines separated by "\\n".

        Raises:
            FileTooLargeError: If the document exceeds `max_file_size_mb`.
            ExtractionError: If the document cannot be read.
        """
        self._validate_size(document_bytes, file_name)
        return self._render_text(document_bytes, file_name)

    @abstractmethod
    def _render_text(self, document_bytes: bytes, file_name: Optional[str] = None) -> str:
        """Return the plain text of an already validated document."""
        pass
