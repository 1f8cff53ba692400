"""Tests for keyword extraction."""

from src.intelligence.keywords import count_occurrences, extract_keywords


class TestExtractKeywords:
    def test_example_persona_and_job(self) -> None:
        keywords = extract_keywords("Travel Planner", "Plan a trip")
        assert keywords == {"travel", "planner", "plan", "trip"}

    def test_drops_short_tokens(self) -> None:
        keywords = extract_keywords("An HR lead", "do the work")
        assert keywords == {"lead", "work"}

    def test_keeps_four_letter_tokens(self) -> None:
        assert extract_keywords("data", "") == {"data"}

    def test_deduplicates_case_insensitively(self) -> None:
        keywords = extract_keywords("Food Critic", "review FOOD trucks")
        assert keywords == {"food", "critic", "review", "trucks"}

    def test_splits_on_whitespace_runs(self) -> None:
        keywords = extract_keywords("Senior\tEngineer", "fix\n\n  builds")
        assert keywords == {"senior", "engineer", "builds"}

    def test_punctuation_stays_attached(self) -> None:
        keywords = extract_keywords("Researcher,", "review papers.")
        assert keywords == {"researcher,", "review", "papers."}

    def test_empty_inputs(self) -> None:
        assert extract_keywords("", "") == frozenset()

    def test_custom_min_length(self) -> None:
        keywords = extract_keywords("big data platform", "", min_length=4)
        assert keywords == {"platform"}


class TestCountOccurrences:
    def test_counts_substrings(self) -> None:
        assert count_occurrences("planning the plan", frozenset({"plan"})) == 2

    def test_counts_non_overlapping(self) -> None:
        assert count_occurrences("abababab", frozenset({"abab"})) == 2

    def test_sums_over_keywords(self) -> None:
        text = "travel plans for travelers"
        assert count_occurrences(text, frozenset({"travel", "plan"})) == 3

    def test_regex_characters_are_literal(self) -> None:
        assert count_occurrences("(dev) notes", frozenset({"(dev)"})) == 1
        assert count_occurrences("dev notes", frozenset({"(dev)"})) == 0

    def test_no_keywords(self) -> None:
        assert count_occurrences("anything", frozenset()) == 0
