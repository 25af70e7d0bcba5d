"""
Council analytics engine.

Pure functions over stored conversation records: per-turn controversy,
the cross-model preference matrix and per-model personality profiles.

Public API:
    - Records: CouncilTurn, iter_council_turns, iter_history_turns
    - Positions: resolve_label, build_position_matrix, iter_resolved_positions
    - Controversy: score_controversy, controversy_metrics, controversy_level,
                   rank_sessions_by_controversy
    - Preferences: build_preference_matrix
    - Profiles: compute_personality_profile, compute_all_profiles, extract_all_models,
                personality_traits, sort_models, has_enough_history
    - Aggregation: calculate_aggregate_rankings, turn_aggregate_rankings
    - Parsing: parse_ranking_from_text
"""

# Aggregation
from .aggregation import calculate_aggregate_rankings, turn_aggregate_rankings

# Controversy
from .controversy import (
    controversy_level,
    controversy_metrics,
    rank_sessions_by_controversy,
    score_controversy,
)

# Positions
from .labels import resolve_label

# Parsers
from .parsers import parse_ranking_from_text
from .positions import build_position_matrix, iter_resolved_positions

# Preferences
from .preferences import build_preference_matrix

# Profiles
from .profiles import (
    average_given_rank,
    compute_all_profiles,
    compute_personality_profile,
    extract_all_models,
    has_enough_history,
    personality_traits,
    sort_models,
)

# Records
from .records import CouncilTurn, PeerRanking, iter_council_turns, iter_history_turns

__all__ = [
    # Records
    "CouncilTurn",
    "PeerRanking",
    "iter_council_turns",
    "iter_history_turns",
    # Positions
    "resolve_label",
    "build_position_matrix",
    "iter_resolved_positions",
    # Controversy
    "score_controversy",
    "controversy_metrics",
    "controversy_level",
    "rank_sessions_by_controversy",
    # Preferences
    "build_preference_matrix",
    # Profiles
    "compute_personality_profile",
    "compute_all_profiles",
    "extract_all_models",
    "average_given_rank",
    "personality_traits",
    "sort_models",
    "has_enough_history",
    # Aggregation
    "calculate_aggregate_rankings",
    "turn_aggregate_rankings",
    # Parsers
    "parse_ranking_from_text",
]
