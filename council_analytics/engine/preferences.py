"""
Cross-model preference matrix.

Shows, for every evaluator, the average position it has given each target
across the whole history.
"""

from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from .positions import iter_resolved_positions
from .records import iter_history_turns
from .stats import mean


def build_preference_matrix(
    history: Iterable[Any] | None, known_models: Iterable[str]
) -> dict[str, dict[str, float | None]]:
    """
    Build the evaluator x target average-position matrix.

    Args:
        history: Conversation records
        known_models: Models taking part in this run; other identities are ignored

    Returns:
        Nested dict matrix[evaluator][target] -> average position, or None
        if the evaluator never ranked that target
    """
    models = list(dict.fromkeys(known_models))
    known = set(models)
    positions = defaultdict(list)

    for turn in iter_history_turns(history):
        for evaluator, target, position in iter_resolved_positions(turn):
            if evaluator in known and target in known:
                positions[(evaluator, target)].append(position)

    return {
        evaluator: {target: mean(positions.get((evaluator, target), ())) for target in models}
        for evaluator in models
    }
