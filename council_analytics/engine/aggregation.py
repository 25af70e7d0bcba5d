"""
Ranking aggregation utilities for council turns.

Calculates the consensus ranking of a turn from its peer evaluations.
"""

from typing import Any

from .positions import build_position_matrix
from .records import CouncilTurn
from .stats import mean


def calculate_aggregate_rankings(turn: CouncilTurn) -> list[dict[str, Any]]:
    """
    Calculate aggregate rankings across all models in one turn.

    Args:
        turn: A qualifying council turn

    Returns:
        List of dicts with model name and average rank, sorted best to worst
    """
    aggregate = [
        {
            "model": model,
            "average_rank": round(mean(positions), 2),
            "rankings_count": len(positions),
        }
        for model, positions in build_position_matrix(turn).items()
        if positions
    ]

    # Sort by average rank (lower is better), then name for stable output
    aggregate.sort(key=lambda x: (x["average_rank"], x["model"]))

    return aggregate


def turn_aggregate_rankings(turn: CouncilTurn) -> list[dict[str, Any]]:
    """Return the stored consensus ranking, recomputing it for legacy turns."""
    if turn.aggregate_rankings:
        return [dict(entry) for entry in turn.aggregate_rankings]
    return calculate_aggregate_rankings(turn)
