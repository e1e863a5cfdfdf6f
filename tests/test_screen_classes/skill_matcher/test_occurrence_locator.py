"""test_occurrence_locator.py
Run tests on find_skill_occurrences
"""
import pytest

from skill_screener.models import Occurrence
from skill_screener.screen_classes.text_extractor.helpers.build_structured_text import build_structured_text
from skill_screener.screen_classes.skill_matcher.occurrence_locator import find_skill_occurrences


class TestFindSkillOccurrences:
    """Tests for case-insensitive, non-overlapping, per-line skill search."""

    def test_single_occurrence(self):
        structured_text = build_structured_text("Skills: Python")
        occurrences = find_skill_occurrences(structured_text, "Python")

        assert occurrences == [Occurrence(line_number=1, estimated_page=1, context="Skills: Python")]

    @pytest.mark.parametrize("skill", ["Python", "python", "PYTHON", "pYtHoN"])
    def test_case_insensitive(self, skill):
        structured_text = build_structured_text("PYTHON developer\nloves python")

        assert len(find_skill_occurrences(structured_text, skill)) == 2

    def test_context_keeps_original_case(self):
        structured_text = build_structured_text("Wrote PYTHON daily")
        occurrences = find_skill_occurrences(structured_text, "python")

        assert occurrences[0].context == "Wrote PYTHON daily"

    def test_overlapping_matches_excluded(self):
        """'aa' in 'aaaa' is found at positions 0 and 2 only."""
        structured_text = build_structured_text("aaaa")

        assert len(find_skill_occurrences(structured_text, "aa")) == 2

    def test_adjacent_repeats_counted(self):
        structured_text = build_structured_text("GoGoGo")

        assert len(find_skill_occurrences(structured_text, "go")) == 3

    def test_substring_matches_inside_words(self):
        """Matching is plain substring search, so 'Go' is found in 'Google'."""
        structured_text = build_structured_text("Worked at Google")

        assert len(find_skill_occurrences(structured_text, "go")) == 1

    def test_phrase_split_across_lines_not_matched(self):
        structured_text = build_structured_text("Machine\nLearning")

        assert find_skill_occurrences(structured_text, "Machine Learning") == []

    def test_absent_skill_returns_empty_list(self):
        structured_text = build_structured_text("Python, SQL")

        assert find_skill_occurrences(structured_text, "Rust") == []

    def test_empty_skill_never_matches(self):
        structured_text = build_structured_text("Python, SQL\n\n")

        assert find_skill_occurrences(structured_text, "") == []

    def test_regex_characters_are_literal(self):
        structured_text = build_structured_text("C++ and C# and .NET, not CXX")

        assert len(find_skill_occurrences(structured_text, "C++")) == 1
        assert len(find_skill_occurrences(structured_text, "C#")) == 1
        assert len(find_skill_occurrences(structured_text, ".net")) == 1

    def test_context_clipped_to_thirty_characters(self):
        before = "b" * 40
        after = "a" * 40
        structured_text = build_structured_text(f"{before}SQL{after}")
        occurrence = find_skill_occurrences(structured_text, "sql")[0]

        assert occurrence.context == "b" * 30 + "SQL" + "a" * 30

    def test_context_clipped_to_line_boundaries(self):
        structured_text = build_structured_text("first line\nSQL at start\nlast line")
        occurrence = find_skill_occurrences(structured_text, "sql")[0]

        assert occurrence.context == "SQL at start"
        assert occurrence.line_number == 2

    def test_context_never_exceeds_radius(self):
        line = "x" * 25 + "Go" + "y" * 5 + "go" + "z" * 50
        structured_text = build_structured_text(line)
        occurrences = find_skill_occurrences(structured_text, "go")

        assert len(occurrences) == 2
        for occurrence in occurrences:
            assert "go" in occurrence.context.lower()
            assert len(occurrence.context) <= 30 + len("go") + 30
            assert occurrence.context in line
        assert occurrences[0].context == line[0:57]
        assert occurrences[1].context == line[2:64]

    def test_custom_context_radius(self):
        structured_text = build_structured_text("I use Docker every day")
        occurrence = find_skill_occurrences(structured_text, "docker", context_radius=2)[0]

        assert occurrence.context == "e Docker e"

    def test_ordering_by_line_then_position(self):
        text = "\n".join(["sql and SQL", "nothing here", "SqL"])
        occurrences = find_skill_occurrences(build_structured_text(text), "sql", context_radius=0)

        assert [(o.line_number, o.context) for o in occurrences] == [
            (1, "sql"),
            (1, "SQL"),
            (3, "SqL"),
        ]

    def test_estimated_page_follows_line(self):
        text = "\n".join(["filler"] * 60 + ["Kubernetes"])
        occurrence = find_skill_occurrences(build_structured_text(text), "kubernetes")[0]

        assert occurrence.line_number == 61
        assert occurrence.estimated_page == 2

    def test_trimmed_content_is_searched(self):
        structured_text = build_structured_text("      Python      ")
        occurrence = find_skill_occurrences(structured_text, "python")[0]

        assert occurrence.context == "Python"
