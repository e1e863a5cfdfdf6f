"""models.py
Holds standardized data models used across various functions.
"""
import math
from typing import List, Dict, Any
from dataclasses import dataclass, field, asdict

from skill_screener.config import SCREENER_DEFAULTS


def estimate_page(line_number: int, lines_per_page: int = SCREENER_DEFAULTS.LINES_PER_PAGE) -> int:
    """Heuristic page number for a 1-based line position."""
    return math.ceil(line_number / lines_per_page)


@dataclass(frozen=True)
class LineRecord:
    """
    Represents a single line of text extracted from a resume.

    Attributes:
        line_number (int): 1-based position of the line in the extracted text.
        content (str): The line's text with leading/trailing whitespace trimmed.
        estimated_page (int): Page estimated from the line position alone.
    """
    line_number: int
    content: str
    estimated_page: int


@dataclass(frozen=True)
class StructuredText:
    """
    Line-addressable view of the full text extracted from one document.

    Attributes:
        full_text (str): The complete extracted text.
        lines (List[LineRecord]): Every line of `full_text` in order (empty lines included).
        lines_per_page (int): Lines assumed per page when estimating pages.
        total_lines (int): Derived, always equal to ``len(lines)``.
        estimated_pages (int): Derived, ``ceil(total_lines / lines_per_page)``.
    """
    full_text: str
    lines: List[LineRecord]
    lines_per_page: int = SCREENER_DEFAULTS.LINES_PER_PAGE
    total_lines: int = field(init=False)
    estimated_pages: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total_lines", len(self.lines))
        object.__setattr__(
            self, "estimated_pages", math.ceil(len(self.lines) / self.lines_per_page)
        )


@dataclass(frozen=True)
class Occurrence:
    """One case-insensitive match of a skill within a single line."""
    line_number: int
    estimated_page: int
    context: str


@dataclass(frozen=True)
class SkillMatch:
    """
    A requested skill found at least once in a resume.

    Attributes:
        skill (str): Skill as supplied by the caller (original case).
        occurrences (List[Occurrence]): Matches in line order, then left-to-right.
        total_occurrences (int): Derived count of `occurrences`.
    """
    skill: str
    occurrences: List[Occurrence]
    total_occurrences: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total_occurrences", len(self.occurrences))


@dataclass(frozen=True)
class ResumeResult:
    """
    Screening verdict for a single resume.

    Attributes:
        file_name (str): Original file name of the resume.
        eligible (bool): Whether the resume meets the eligibility threshold.
        match_percentage (int): Score between 0 and 100.
        matched (List[SkillMatch]): Skills found, with evidence.
        missing (List[str]): Skills with zero occurrences (raw strings).
        summary (str): Human-readable summary.
        total_lines (int): Line count of the extracted text.
        estimated_pages (int): Estimated page count of the extracted text.
    """
    file_name: str
    eligible: bool
    match_percentage: int
    matched: List[SkillMatch]
    missing: List[str]
    summary: str
    total_lines: int
    estimated_pages: int


@dataclass(frozen=True)
class JudgeVerdict:
    """Structured reply of the semantic judge for one resume."""
    overall_score: int
    eligible: bool
    summary: str


@dataclass(frozen=True)
class BatchReport:
    """
    Report for one screening request.

    Attributes:
        results (List[ResumeResult]): One result per input document, in input order.
        total_resumes (int): Derived, ``len(results)``.
        eligible_count (int): Derived, number of eligible results.
    """
    results: List[ResumeResult]
    total_resumes: int = field(init=False)
    eligible_count: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total_resumes", len(self.results))
        object.__setattr__(
            self, "eligible_count", sum(1 for result in self.results if result.eligible)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the report as plain JSON-serializable data."""
        return {
            "total_resumes": self.total_resumes,
            "eligible_count": self.eligible_count,
            "results": [asdict(result) for result in self.results],
        }
