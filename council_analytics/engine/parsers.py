"""
Text parsing utilities for stored peer rankings.

Older records keep only the evaluator's raw ranking text; the label order
is recovered from it here.
"""

import re

_LABEL_PATTERN = r"Response [A-Z]"
_RANKING_HEADER = "FINAL RANKING:"


def parse_ranking_from_text(ranking_text: str) -> list[str]:
    """
    Parse the FINAL RANKING section from an evaluator's response.

    Args:
        ranking_text: The full text response from the evaluator

    Returns:
        List of response labels in ranked order (best first)
    """
    if not ranking_text:
        return []

    if _RANKING_HEADER in ranking_text:
        ranking_section = ranking_text.split(_RANKING_HEADER, 1)[1]
        # Prefer the numbered list format (e.g., "1. Response A")
        numbered_matches = re.findall(rf"\d+\.\s*{_LABEL_PATTERN}", ranking_section)
        if numbered_matches:
            return [re.search(_LABEL_PATTERN, m).group() for m in numbered_matches]
        return re.findall(_LABEL_PATTERN, ranking_section)

    # Fallback: any "Response X" mentions, in order of appearance
    return re.findall(_LABEL_PATTERN, ranking_text)
