"""build_structured_text.py
Turns the plain-text rendering of a document into a line-addressable StructuredText.
"""

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.models import LineRecord, StructuredText, estimate_page

def build_structured_text(
    full_text: str,
    lines_per_page: int = SCREENER_DEFAULTS.LINES_PER_PAGE,
) -> StructuredText:
    """
    Split `full_text` on newlines and number every line.

    Empty lines are kept as records with empty `content`, and a trailing newline
    produces a trailing empty record. Each line is trimmed for presentation only;
    no line is ever dropped.

    Args:
        full_text (str): Plain text rendered from a document.
        lines_per_page (int): Lines assumed per page for page estimates.

    Returns:
        StructuredText: Text with 1-based line numbers and estimated pages.
    """
    if lines_per_page <= 0:
        raise ValueError(f"lines_per_page must be positive (got {lines_per_page}).")

    lines = [
        LineRecord(
            line_number=index,
            content=raw_line.strip(),
            estimated_page=estimate_page(index, lines_per_page),
        )
        for index, raw_line in enumerate(full_text.split("\n"), start=1)
    ]

    return StructuredText(
        full_text=full_text,
        lines=lines,
        lines_per_page=lines_per_page,
    )
