"""
Controversy scoring for council turns and sessions.

A turn's controversy score measures how much evaluators disagreed about
where each model belongs. It is the average per-model standard deviation of
received positions, normalized by the standard deviation of a discrete
uniform distribution over the label positions:

    max_std = (K - 1) / sqrt(12)

0 means every evaluator agreed on every position; 100 means disagreement
at least as large as random rankings would produce.
"""

import logging
import math
from collections.abc import Iterable
from typing import Any

from ..settings import CONTROVERSY_LEVEL_MAX, CONTROVERSY_LEVELS
from .positions import build_position_matrix
from .records import CouncilTurn, iter_council_turns, iter_sessions
from .stats import mean, population_std, population_variance

logger = logging.getLogger(__name__)

NO_DATA_LEVEL = "No Data"


def _max_std(label_count: int) -> float:
    return (label_count - 1) / math.sqrt(12)


def _normalize(avg_std: float, label_count: int) -> int:
    # Halves round up, not to even
    return math.floor(min(100.0, avg_std / _max_std(label_count) * 100) + 0.5)


def score_controversy(turn: CouncilTurn) -> int | None:
    """
    Score evaluator disagreement for one turn.

    Args:
        turn: A qualifying council turn

    Returns:
        Integer in [0, 100], or None when there are fewer than two peer
        rankings, fewer than two labels, or no resolvable positions
    """
    if len(turn.rankings) < 2 or turn.label_count < 2:
        return None

    matrix = build_position_matrix(turn)
    avg_std = mean(population_std(positions) for positions in matrix.values() if positions)
    if avg_std is None:
        return None
    return _normalize(avg_std, turn.label_count)


def controversy_metrics(turn: CouncilTurn) -> dict[str, Any] | None:
    """
    Detailed disagreement breakdown for one turn.

    Returns:
        Dict with 'controversy_score', per-model 'stats' (mean, variance,
        std_dev, positions), 'position_matrix' and 'labels', or None when
        the score is undefined
    """
    score = score_controversy(turn)
    if score is None:
        return None

    matrix = build_position_matrix(turn)
    stats = {
        model: {
            "mean": mean(positions),
            "variance": population_variance(positions),
            "std_dev": population_std(positions),
            "positions": list(positions),
        }
        for model, positions in matrix.items()
    }
    return {
        "controversy_score": score,
        "stats": stats,
        "position_matrix": matrix,
        "labels": sorted(turn.labels),
    }


def controversy_level(score: int | None) -> str:
    """Describe a controversy score with its configured band label."""
    if score is None:
        return NO_DATA_LEVEL
    for upper_bound, label in CONTROVERSY_LEVELS:
        if score < upper_bound:
            return label
    return CONTROVERSY_LEVEL_MAX


def session_controversy(session: dict[str, Any]) -> int:
    """Peak controversy over a session's turns; 0 when none can be scored."""
    scores = [score_controversy(turn) for turn in iter_council_turns(session)]
    return max((score for score in scores if score is not None), default=0)


def rank_sessions_by_controversy(history: Iterable[Any] | None) -> list[dict[str, Any]]:
    """
    Order sessions by their most controversial turn.

    Sessions without any scorable turn report 0. Ties keep input order.

    Args:
        history: Conversation records

    Returns:
        List of dicts with 'session_id', 'title', 'created_at' and
        'controversy_score', most controversial first
    """
    scores = [
        {
            "session_id": session.get("id"),
            "title": session.get("title"),
            "created_at": session.get("created_at"),
            "controversy_score": session_controversy(session),
        }
        for session in iter_sessions(history)
    ]
    logger.debug("Scored controversy for %d sessions", len(scores))

    # sorted() is stable, so equal scores stay in input order
    return sorted(scores, key=lambda entry: -entry["controversy_score"])
