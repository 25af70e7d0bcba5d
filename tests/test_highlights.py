"""
Tests for reasoning highlight extraction.
"""

from council_analytics.highlights import extract_reasoning_highlights
from tests.conftest import GEMINI, SAMPLE_LABEL_TO_MODEL

RANKING_TEXT = """Response B is excellent and thorough. Response A is vague about sources.
Response C has a weak conclusion!

FINAL RANKING:
1. Response B
2. Response A
3. Response C"""


class TestExtractReasoningHighlights:
    """Tests for extract_reasoning_highlights function."""

    def test_top_ranked_response(self):
        result = extract_reasoning_highlights({"ranking": RANKING_TEXT}, SAMPLE_LABEL_TO_MODEL)

        assert result["top_label"] == "Response B"
        assert result["top_model"] == GEMINI

    def test_keyword_sentences(self):
        result = extract_reasoning_highlights({"ranking": RANKING_TEXT}, SAMPLE_LABEL_TO_MODEL)

        # "excellent" and "thorough" share one sentence
        assert result["positive"] == ["Response B is excellent and thorough."]
        assert result["negative"] == [
            "Response A is vague about sources.",
            "Response C has a weak conclusion!",
        ]

    def test_parsed_ranking_takes_precedence(self):
        ranking = {"ranking": RANKING_TEXT, "parsed_ranking": [" Response C "]}

        result = extract_reasoning_highlights(ranking, SAMPLE_LABEL_TO_MODEL)

        assert result["top_label"] == "Response C"

    def test_unmapped_label(self):
        result = extract_reasoning_highlights({"ranking": RANKING_TEXT}, None)

        assert result["top_model"] is None

    def test_no_labels(self):
        assert extract_reasoning_highlights({"ranking": "I liked them all."}, {}) is None
        assert extract_reasoning_highlights({}, {}) is None
