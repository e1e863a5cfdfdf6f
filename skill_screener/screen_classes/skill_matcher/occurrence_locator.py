"""occurrence_locator.py
Finds every mention of a skill in a StructuredText, with surrounding context.
"""
import re
from typing import List

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.models import Occurrence, StructuredText


def find_skill_occurrences(
    structured_text: StructuredText,
    skill: str,
    context_radius: int = SCREENER_DEFAULTS.CONTEXT_RADIUS,
) -> List[Occurrence]:
    """
    Locate every case-insensitive occurrence of `skill` line by line.

    Matches never span a line break and never overlap: once a match is found
    the scan resumes right after it, so "aa" is found twice in "aaaa".
    Each occurrence keeps up to `context_radius` characters on both sides of
    the match, clipped to the line.

    Args:
        structured_text (StructuredText): Text to search.
        skill (str): Skill to look for. An empty string never matches.
        context_radius (int): Characters of context kept on each side.

    Returns:
        List[Occurrence]: Occurrences in line order, then left-to-right.
    """
    if not skill:
        return []

    # re.finditer resumes after each match, which excludes overlaps
    pattern = re.compile(re.escape(skill), re.IGNORECASE)
    occurrences = []

    for line in structured_text.lines:
        for match in pattern.finditer(line.content):
            context_start = max(0, match.start() - context_radius)
            context_end = min(len(line.content), match.end() + context_radius)
            occurrences.append(
                Occurrence(
                    line_number=line.line_number,
                    estimated_page=line.estimated_page,
                    context=line.content[context_start:context_end],
                )
            )

    return occurrences
