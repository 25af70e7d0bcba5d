"""
Best-effort reasoning highlights from an evaluator's ranking text.

Pulls sentences containing strength and weakness keywords. This is a
display aid, not part of the ranking statistics.
"""

import re
from collections.abc import Mapping
from typing import Any

from .engine.labels import resolve_label
from .engine.parsers import parse_ranking_from_text

POSITIVE_KEYWORDS = [
    "excellent",
    "comprehensive",
    "thorough",
    "accurate",
    "clear",
    "detailed",
    "well-reasoned",
    "insightful",
    "thoughtful",
    "good",
    "strong",
    "best",
]

NEGATIVE_KEYWORDS = [
    "lacking",
    "unclear",
    "incomplete",
    "vague",
    "missing",
    "weak",
    "superficial",
    "verbose",
    "confusing",
    "inaccurate",
    "poor",
]

MAX_HIGHLIGHTS = 3
_PER_KEYWORD = 2


def _keyword_sentences(text: str, keywords: list[str]) -> list[str]:
    found = []
    for keyword in keywords:
        pattern = rf"[^.!?]*\b{re.escape(keyword)}\b[^.!?]*[.!?]"
        for match in re.findall(pattern, text, re.IGNORECASE)[:_PER_KEYWORD]:
            sentence = match.strip()
            if sentence not in found:
                found.append(sentence)
    return found[:MAX_HIGHLIGHTS]


def extract_reasoning_highlights(
    ranking: dict[str, Any], label_to_model: Mapping[str, str] | None
) -> dict[str, Any] | None:
    """
    Summarize why an evaluator ranked the way it did.

    Args:
        ranking: Stage 2 entry with 'ranking' text and optional 'parsed_ranking'
        label_to_model: The turn's label mapping

    Returns:
        Dict with 'top_label', 'top_model', 'positive' and 'negative'
        sentences, or None if the ranking names no labels
    """
    text = ranking.get("ranking") or ""
    parsed = ranking.get("parsed_ranking")
    if not isinstance(parsed, list):
        parsed = parse_ranking_from_text(text)
    labels = [label for label in parsed if isinstance(label, str) and label.strip()]
    if not labels:
        return None

    top_label = labels[0].strip()
    return {
        "top_label": top_label,
        "top_model": resolve_label(top_label, label_to_model),
        "positive": _keyword_sentences(text, POSITIVE_KEYWORDS),
        "negative": _keyword_sentences(text, NEGATIVE_KEYWORDS),
    }
