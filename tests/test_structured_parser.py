"""
Tests for the strict generative-text line grammar.
"""
from movie_match.extraction import StructuredLineParser


class TestParseLine:
    """Tests for single-line parsing."""

    def test_parses_all_four_fields(self):
        candidate = StructuredLineParser().parse_line(
            "1. Inception (2010) - 92% - A thief who steals secrets"
        )

        assert candidate.title == "Inception"
        assert candidate.year == 2010
        assert candidate.confidence_hint == 92
        assert candidate.explanation == "A thief who steals secrets"

    def test_title_with_internal_punctuation(self):
        candidate = StructuredLineParser().parse_line(
            "3. Spider-Man: Into the Spider-Verse (2018) - 64% - Teen gains spider powers"
        )

        assert candidate.title == "Spider-Man: Into the Spider-Verse"
        assert candidate.year == 2018

    def test_markdown_bold_title_is_cleaned(self):
        candidate = StructuredLineParser().parse_line(
            "1. **Inception** (2010) - 92% - Dream heist"
        )

        assert candidate.title == "Inception"

    def test_dash_variants_accepted(self):
        candidate = StructuredLineParser().parse_line("2. Paprika (2006) — 71% — Dream therapy")

        assert candidate.title == "Paprika"
        assert candidate.confidence_hint == 71

    def test_missing_confidence_is_rejected(self):
        assert StructuredLineParser().parse_line(
            "2. The Matrix (1999) - A hacker learns the truth"
        ) is None

    def test_missing_year_is_rejected(self):
        assert StructuredLineParser().parse_line("1. Inception - 92% - Dreams") is None

    def test_confidence_above_100_is_rejected(self):
        assert StructuredLineParser().parse_line("1. Inception (2010) - 150% - Dreams") is None

    def test_blank_line(self):
        assert StructuredLineParser().parse_line("") is None
        assert StructuredLineParser().parse_line(None) is None


class TestParse:
    """Tests for whole-response parsing."""

    def test_bad_lines_dropped_without_affecting_others(self):
        text = (
            "Here are some movies:\n"
            "1. Inception (2010) - 92% - A thief who steals secrets\n"
            "2. The Matrix (1999) - A hacker learns the truth\n"
            "\n"
            "3. Paprika (2006) - 71% - A dream detective\n"
        )

        candidates = StructuredLineParser().parse(text)

        assert [c.title for c in candidates] == ["Inception", "Paprika"]
        assert [c.confidence_hint for c in candidates] == [92, 71]

    def test_preserves_model_order(self):
        text = (
            "1. Paprika (2006) - 60% - a\n"
            "2. Inception (2010) - 95% - b\n"
        )

        titles = [c.title for c in StructuredLineParser().parse(text)]

        assert titles == ["Paprika", "Inception"]

    def test_empty_response(self):
        assert StructuredLineParser().parse("") == []
        assert StructuredLineParser().parse(None) == []
