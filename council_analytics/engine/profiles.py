"""
Model personality profiles.

Summarizes, per model and across the whole history, how it ranks others
(given), how others rank it (received) and how it ranks itself.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from ..settings import MIN_PROFILE_SESSIONS, TRAIT_THRESHOLDS
from .positions import iter_resolved_positions
from .preferences import build_preference_matrix
from .records import iter_council_messages, iter_history_turns, iter_sessions
from .stats import frequency, mean, population_std

logger = logging.getLogger(__name__)

SORT_CRITERIA = ("consistency", "consensus", "harshness", "generosity")

UNKNOWN_TRAIT = "Unknown"


def extract_all_models(history: Iterable[Any] | None) -> list[str]:
    """
    Collect every model that answered in any council turn.

    Only individual responses count: a model named solely in a label
    mapping or a ranking is not part of the council.
    """
    models = set()
    for session in iter_sessions(history):
        for message in iter_council_messages(session):
            responses = message.get("stage1")
            if not isinstance(responses, list):
                continue
            for response in responses:
                if isinstance(response, dict) and isinstance(response.get("model"), str):
                    models.add(response["model"])
    return sorted(model for model in models if model)


def _summarize(buckets: dict[str, list[int]]) -> dict[str, dict[str, Any]]:
    return {
        model: {"average_rank": mean(positions), "count": len(positions)}
        for model, positions in sorted(buckets.items())
    }


def compute_personality_profile(history: Iterable[Any] | None, model: str) -> dict[str, Any]:
    """
    Compute the personality profile of one model.

    Received statistics only count rankings written by other models; the
    model's own view of itself is reported as the self-assessment.

    Args:
        history: Conversation records
        model: Model identifier

    Returns:
        Profile dict. 'self_assessment' is 0.0 when the model never ranked
        itself (see 'self_assessment_count'); 'average_rank_received' and
        'consistency' are None when nobody ranked the model
    """
    given = defaultdict(list)
    received = defaultdict(list)
    self_positions = []

    for turn in iter_history_turns(history):
        for evaluator, target, position in iter_resolved_positions(turn):
            if evaluator == model:
                given[target].append(position)
                if target == model:
                    self_positions.append(position)
            elif target == model and evaluator is not None:
                received[evaluator].append(position)

    all_received = [position for positions in received.values() for position in positions]
    self_assessment = mean(self_positions)

    return {
        "model": model,
        "total_given": sum(len(positions) for positions in given.values()),
        "total_received": len(all_received),
        "self_assessment": self_assessment if self_assessment is not None else 0.0,
        "self_assessment_count": len(self_positions),
        "given": _summarize(given),
        "received": _summarize(received),
        "average_rank_received": mean(all_received),
        # Lower = steadier treatment by peers
        "consistency": population_std(all_received),
        "ranking_frequency": frequency(all_received),
    }


def compute_all_profiles(
    history: Iterable[Any] | None, generated_at: str | None = None
) -> dict[str, Any]:
    """
    Compute profiles for every known model plus the preference matrix.

    Args:
        history: Conversation records
        generated_at: Timestamp to stamp on the summary; defaults to now (UTC).
            Pass a fixed value for reproducible output.

    Returns:
        Dict with 'profiles', 'generators', 'matrix' and 'summary'
    """
    history = list(iter_sessions(history))
    models = extract_all_models(history)
    profiles = {model: compute_personality_profile(history, model) for model in models}
    matrix = build_preference_matrix(history, models)

    summary = {
        "total_sessions": len(history),
        "total_generators": len(models),
        "generators": list(models),
        "generated_at": generated_at or datetime.now(timezone.utc).isoformat(),
    }
    logger.info("Computed profiles for %d models over %d sessions", len(models), len(history))

    return {"profiles": profiles, "generators": models, "matrix": matrix, "summary": summary}


def has_enough_history(analytics: dict[str, Any], minimum: int | None = None) -> bool:
    """Whether the analytics cover enough sessions to be worth reporting."""
    summary = analytics.get("summary") or {}
    required = MIN_PROFILE_SESSIONS if minimum is None else minimum
    return summary.get("total_sessions", 0) >= required


def average_given_rank(profile: dict[str, Any]) -> float | None:
    """Mean of the average positions a model hands out (higher = more generous)."""
    return mean(
        stat["average_rank"]
        for stat in profile.get("given", {}).values()
        if stat.get("average_rank") is not None
    )


def _band(value: float | None, trait: str, labels: tuple[str, str, str]) -> str:
    if value is None:
        return UNKNOWN_TRAIT
    low, high = TRAIT_THRESHOLDS[trait]
    if value < low:
        return labels[0]
    if value < high:
        return labels[1]
    return labels[2]


def personality_traits(profile: dict[str, Any]) -> list[dict[str, str]]:
    """
    Label a profile with confidence, consistency and harshness traits.

    Returns:
        List of dicts with 'type' and 'label'
    """
    self_assessment = profile["self_assessment"] if profile.get("self_assessment_count") else None
    return [
        {
            "type": "confidence",
            "label": _band(
                self_assessment,
                "confidence",
                ("Overly Confident", "Moderately Confident", "Modest"),
            ),
        },
        {
            "type": "consistency",
            "label": _band(
                profile.get("consistency"),
                "consistency",
                ("Very Consistent", "Generally Consistent", "Varies"),
            ),
        },
        {
            "type": "harshness",
            "label": _band(
                average_given_rank(profile), "harshness", ("Critical", "Balanced", "Generous")
            ),
        },
    ]


def sort_models(profiles: dict[str, dict[str, Any]], by: str = "consistency") -> list[str]:
    """
    Order models by a profile criterion.

    Models without data for the criterion sort last; ties sort by name.

    Raises:
        ValueError: If the criterion is unknown
    """
    if by not in SORT_CRITERIA:
        raise ValueError(f"Unknown sort criterion: {by!r} (expected one of {SORT_CRITERIA})")

    def metric(model: str) -> float | None:
        profile = profiles[model]
        if by == "consistency":
            return profile.get("consistency")
        if by == "consensus":
            return profile.get("average_rank_received")
        value = average_given_rank(profile)
        if by == "generosity" and value is not None:
            return -value
        return value

    def key(model: str) -> tuple:
        value = metric(model)
        return (value is None, value if value is not None else 0.0, model)

    return sorted(profiles, key=key)
