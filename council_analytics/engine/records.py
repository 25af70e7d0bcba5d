"""
Read-only views over stored conversation records.

A conversation is the dict written by the council pipeline::

    {"id": ..., "title": ..., "created_at": ..., "messages": [...]}

Only council messages that carry peer rankings and a label mapping take
part in the statistics. Anything else is skipped, never raised.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .parsers import parse_ranking_from_text

logger = logging.getLogger(__name__)

# "assistant" is the role name used by stored conversations
COUNCIL_ROLES = frozenset({"assistant", "council"})


@dataclass(frozen=True)
class PeerRanking:
    """One evaluator's ordered labels, best first, exactly as stored."""

    evaluator: str | None
    labels: tuple[Any, ...]


@dataclass(frozen=True)
class CouncilTurn:
    """A single council round, scoped to its own anonymization mapping.

    Attributes:
        rankings: Peer rankings in stored order.
        label_to_model: Read-only label -> model mapping for this turn only.
        labels: Every label shown to evaluators, including ones whose model
            is missing from the record.
        aggregate_rankings: Precomputed consensus list, if the record had one.
    """

    rankings: tuple[PeerRanking, ...]
    label_to_model: Mapping[str, str]
    labels: tuple[str, ...]
    aggregate_rankings: tuple[dict[str, Any], ...] | None = None

    @property
    def label_count(self) -> int:
        return len(self.labels)

    @classmethod
    def from_message(cls, message: Any) -> "CouncilTurn | None":
        """Build a turn from a stored message, or None if it does not qualify."""
        if not is_council_message(message):
            return None

        stage2 = message.get("stage2")
        metadata = message.get("metadata")
        if not isinstance(stage2, list) or not isinstance(metadata, dict):
            logger.debug("Skipping council message without stage2 rankings or metadata")
            return None

        raw_mapping = metadata.get("label_to_model")
        if not isinstance(raw_mapping, dict):
            logger.debug("Skipping council message without a label mapping")
            return None

        labels = tuple(
            dict.fromkeys(label.strip() for label in raw_mapping if isinstance(label, str))
        )
        mapping = {
            label.strip(): model
            for label, model in raw_mapping.items()
            if isinstance(label, str) and isinstance(model, str) and model
        }
        if not mapping:
            logger.debug("Skipping council message with an empty label mapping")
            return None

        rankings = tuple(
            ranking for ranking in (_peer_ranking(entry) for entry in stage2) if ranking
        )

        aggregate = metadata.get("aggregate_rankings")
        if isinstance(aggregate, list):
            aggregate = tuple(dict(entry) for entry in aggregate if isinstance(entry, dict))
        else:
            aggregate = None

        return cls(
            rankings=rankings,
            label_to_model=MappingProxyType(mapping),
            labels=labels,
            aggregate_rankings=aggregate,
        )


def _peer_ranking(entry: Any) -> PeerRanking | None:
    """Normalize one stage2 entry; legacy entries only carry raw text."""
    if not isinstance(entry, dict):
        logger.debug("Dropping malformed peer ranking entry: %r", entry)
        return None

    evaluator = entry.get("model")
    if not isinstance(evaluator, str) or not evaluator:
        evaluator = None

    labels = entry.get("parsed_ranking")
    if not isinstance(labels, list):
        text = entry.get("ranking")
        labels = parse_ranking_from_text(text) if isinstance(text, str) else []

    return PeerRanking(
        evaluator=evaluator,
        # Unresolvable entries keep their slot so later positions stay put
        labels=tuple(labels),
    )


def is_council_message(message: Any) -> bool:
    return isinstance(message, dict) and message.get("role") in COUNCIL_ROLES


def iter_sessions(history: Iterable[Any] | None) -> Iterator[dict[str, Any]]:
    """Yield well-formed session dicts; a missing history yields nothing."""
    for session in history or ():
        if isinstance(session, dict):
            yield session
        else:
            logger.debug("Skipping malformed session record: %r", type(session).__name__)


def iter_council_messages(session: dict[str, Any]) -> Iterator[dict[str, Any]]:
    messages = session.get("messages")
    if not isinstance(messages, list):
        return
    for message in messages:
        if is_council_message(message):
            yield message


def iter_council_turns(session: dict[str, Any]) -> Iterator[CouncilTurn]:
    """Yield the qualifying council turns of one session, in order."""
    for message in iter_council_messages(session):
        turn = CouncilTurn.from_message(message)
        if turn is not None:
            yield turn


def iter_history_turns(history: Iterable[Any] | None) -> Iterator[CouncilTurn]:
    """Yield every qualifying council turn across a history of sessions."""
    for session in iter_sessions(history):
        yield from iter_council_turns(session)
