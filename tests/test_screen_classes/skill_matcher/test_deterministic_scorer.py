"""test_deterministic_scorer.py
Run tests on DeterministicScorer and its helpers
"""
import pytest

from skill_screener.models import ResumeResult, SkillMatch
from skill_screener.screen_classes.text_extractor.helpers.build_structured_text import build_structured_text
from skill_screener.screen_classes.skill_matcher.deterministic_scorer import (
    DeterministicScorer,
    build_summary,
    compute_match_percentage,
    split_required_skills,
)

RESUME_TEXT = (
    "Jane Doe\n"
    "Built python services\n"
    "\n"
    "Skills: Python, sql"
)


class TestSplitRequiredSkills:
    """Tests for split_required_skills."""

    def test_split_and_trim(self):
        assert split_required_skills(" Python ,SQL,  Go ") == ["Python", "SQL", "Go"]

    def test_empty_entries_preserved(self):
        assert split_required_skills("Python,,SQL,") == ["Python", "", "SQL", ""]

    def test_duplicates_preserved(self):
        assert split_required_skills("Go, Go") == ["Go", "Go"]

    def test_single_skill(self):
        assert split_required_skills("Kubernetes") == ["Kubernetes"]


class TestComputeMatchPercentage:
    """Tests for half-up rounding of the match percentage."""

    @pytest.mark.parametrize("matched,total,expected", [
        (0, 3, 0),
        (1, 3, 33),
        (2, 3, 67),
        (3, 3, 100),
        (1, 8, 13),   # 12.5 rounds up
        (3, 8, 38),   # 37.5 rounds up
        (1, 200, 1),  # 0.5 rounds up
        (59, 100, 59),
        (3, 5, 60),
    ])
    def test_rounding(self, matched, total, expected):
        assert compute_match_percentage(matched, total) == expected

    def test_zero_total_raises(self):
        with pytest.raises(ValueError):
            compute_match_percentage(0, 0)


class TestDeterministicScorer:
    """Tests for DeterministicScorer.score."""

    def test_end_to_end_example(self):
        """Python x2, SQL x1, no Go -> 67%, eligible."""
        result = DeterministicScorer().score(
            build_structured_text(RESUME_TEXT), "Python, SQL, Go", "jane.pdf"
        )

        assert isinstance(result, ResumeResult)
        assert [m.skill for m in result.matched] == ["Python", "SQL"]
        assert [m.total_occurrences for m in result.matched] == [2, 1]
        assert result.missing == ["Go"]
        assert result.match_percentage == 67
        assert result.eligible is True
        assert result.summary == "Found 2/3 required skills"
        assert result.file_name == "jane.pdf"
        assert result.total_lines == 4
        assert result.estimated_pages == 1

    def test_matched_keeps_original_case_and_evidence(self):
        result = DeterministicScorer().score(
            build_structured_text(RESUME_TEXT), "pYtHoN", "jane.pdf"
        )
        skill_match: SkillMatch = result.matched[0]

        assert skill_match.skill == "pYtHoN"
        assert [o.line_number for o in skill_match.occurrences] == [2, 4]
        assert skill_match.occurrences[0].context == "Built python services"

    def test_matched_plus_missing_equals_requested(self):
        skills = "Python, Rust, , SQL, Python, Haskell,"
        result = DeterministicScorer().score(build_structured_text(RESUME_TEXT), skills, "x")

        assert len(result.matched) + len(result.missing) == len(split_required_skills(skills))

    def test_duplicate_skills_evaluated_twice(self):
        result = DeterministicScorer().score(build_structured_text(RESUME_TEXT), "Python, Python", "x")

        assert [m.skill for m in result.matched] == ["Python", "Python"]
        assert result.match_percentage == 100

    def test_empty_skill_is_missing(self):
        """A trailing comma yields an empty skill which is always missing."""
        result = DeterministicScorer().score(build_structured_text(RESUME_TEXT), "Python,", "x")

        assert result.missing == [""]
        assert result.match_percentage == 50
        assert result.eligible is False
        assert result.summary == "Found 1/2 required skills"

    def test_missing_keeps_raw_skill_strings_in_order(self):
        result = DeterministicScorer().score(build_structured_text(RESUME_TEXT), "Rust, Python, Elixir", "x")

        assert result.missing == ["Rust", "Elixir"]

    def test_threshold_boundary(self):
        """59% is not eligible, 60% is."""
        text = build_structured_text(" ".join(f"skill{n:03d}" for n in range(59)))
        skills_100 = ", ".join(f"skill{n:03d}" for n in range(100))
        result_59 = DeterministicScorer().score(text, skills_100, "x")

        assert result_59.match_percentage == 59
        assert result_59.eligible is False

        text_60 = build_structured_text("alpha beta gamma")
        result_60 = DeterministicScorer().score(text_60, "alpha, beta, gamma, delta, epsilon", "x")

        assert result_60.match_percentage == 60
        assert result_60.eligible is True

    def test_custom_threshold(self):
        scorer = DeterministicScorer(threshold_percent=70)
        result = scorer.score(build_structured_text(RESUME_TEXT), "Python, SQL, Go", "x")

        assert result.match_percentage == 67
        assert result.eligible is False

    def test_custom_context_radius(self):
        scorer = DeterministicScorer(context_radius=0)
        result = scorer.score(build_structured_text(RESUME_TEXT), "sql", "x")

        assert result.matched[0].occurrences[0].context == "sql"

    def test_no_match_at_all(self):
        result = DeterministicScorer().score(build_structured_text(""), "Python", "empty.txt")

        assert result.matched == []
        assert result.match_percentage == 0
        assert result.eligible is False
        assert result.total_lines == 1

    def test_build_summary(self):
        assert build_summary(0, 5) == "Found 0/5 required skills"
