"""
Position extraction for a single council turn.

A position is the 1-indexed place a target model received in one
evaluator's ranking.
"""

import logging
from collections import defaultdict
from collections.abc import Iterator

from .labels import resolve_label
from .records import CouncilTurn

logger = logging.getLogger(__name__)


def iter_resolved_positions(turn: CouncilTurn) -> Iterator[tuple[str | None, str, int]]:
    """
    Yield (evaluator, target, position) for every resolvable label in a turn.

    Unresolvable labels are dropped. Each evaluator contributes at most one
    position per target; a repeated target keeps its first (best) position.
    Self-rankings are yielded like any other entry.
    """
    for ranking in turn.rankings:
        seen = set()
        for index, label in enumerate(ranking.labels):
            target = resolve_label(label, turn.label_to_model)
            if target is None:
                logger.debug("Dropping unresolvable label %r from %s", label, ranking.evaluator)
                continue
            if target in seen:
                continue
            seen.add(target)
            yield ranking.evaluator, target, index + 1


def build_position_matrix(turn: CouncilTurn) -> dict[str, list[int]]:
    """
    Collect the positions each model received in one turn.

    Args:
        turn: A qualifying council turn

    Returns:
        Dict of model -> positions, one entry per evaluator that ranked it
    """
    matrix = defaultdict(list)
    for _evaluator, target, position in iter_resolved_positions(turn):
        matrix[target].append(position)
    return dict(matrix)
