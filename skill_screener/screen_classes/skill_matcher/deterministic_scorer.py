"""deterministic_scorer.py
Scores a resume by plain substring matching of the required skills.
"""
from typing import List

from skill_screener.config import SCREENER_DEFAULTS
from skill_screener.models import ResumeResult, SkillMatch, StructuredText
from skill_screener.screen_classes.skill_matcher.occurrence_locator import find_skill_occurrences


def split_required_skills(required_skills: str) -> List[str]:
    """
    Split a comma-separated skill list and trim each entry.

    Empty entries (e.g. from a trailing comma) are kept as empty-string skills;
    they never match and are reported as missing.
    """
    return [skill.strip() for skill in required_skills.split(",")]


def compute_match_percentage(matched_count: int, total_count: int) -> int:
    """
    Return ``100 * matched_count / total_count`` rounded half-up to an int.

    Integer arithmetic keeps exact halves (e.g. 1/8 = 12.5%) rounding up.

    Raises:
        ValueError: If `total_count` is not positive.
    """
    if total_count <= 0:
        raise ValueError(f"total_count must be positive (got {total_count}).")
    return (200 * matched_count + total_count) // (2 * total_count)


def build_summary(matched_count: int, total_count: int) -> str:
    return f"Found {matched_count}/{total_count} required skills"


class DeterministicScorer:
    """
    Computes a ResumeResult from skill occurrences alone.

    A resume is eligible when its match percentage reaches `threshold_percent`.

    Args:
        threshold_percent (int): Minimum match percentage for eligibility.
        context_radius (int): Characters of context kept around each occurrence.
    """

    def __init__(
        self,
        threshold_percent: int = SCREENER_DEFAULTS.THRESHOLD_PERCENT,
        context_radius: int = SCREENER_DEFAULTS.CONTEXT_RADIUS,
    ):
        self.threshold_percent = threshold_percent
        self.context_radius = context_radius

    def score(
        self,
        structured_text: StructuredText,
        required_skills: str,
        file_name: str,
    ) -> ResumeResult:
        """
        Score one resume against a comma-separated skill list.

        Skills are evaluated in request order and without deduplication, so
        ``len(matched) + len(missing)`` always equals the number of requested skills.

        Args:
            structured_text (StructuredText): The resume text.
            required_skills (str): Comma-separated required skills.
            file_name (str): Name reported in the result.

        Returns:
            ResumeResult: Deterministic verdict with per-skill evidence.
        """
        skill_list = split_required_skills(required_skills)
        matched: List[SkillMatch] = []
        missing: List[str] = []

        for skill in skill_list:
            occurrences = find_skill_occurrences(
                structured_text, skill, context_radius=self.context_radius
            )
            if occurrences:
                matched.append(SkillMatch(skill=skill, occurrences=occurrences))
            else:
                missing.append(skill)

        match_percentage = compute_match_percentage(len(matched), len(skill_list))

        return ResumeResult(
            file_name=file_name,
            eligible=match_percentage >= self.threshold_percent,
            match_percentage=match_percentage,
            matched=matched,
            missing=missing,
            summary=build_summary(len(matched), len(skill_list)),
            total_lines=structured_text.total_lines,
            estimated_pages=structured_text.estimated_pages,
        )
