"""Configuration for council analytics.

Loads settings from config.yaml if present, falls back to defaults.
The log level may be overridden from the environment.
"""

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

# Find project root (where config.yaml lives)
_PROJECT_ROOT = Path(__file__).parent.parent
_CONFIG_PATH = _PROJECT_ROOT / "config.yaml"

# Defaults (used if config.yaml is missing)
_DEFAULTS = {
    "min_profile_sessions": 3,
    "controversy_levels": [
        [20, "Strong Consensus"],
        [40, "General Agreement"],
        [60, "Mixed Opinions"],
        [80, "High Disagreement"],
    ],
    "controversy_level_max": "Maximum Disagreement",
    "trait_thresholds": {
        "confidence": [1.5, 2.2],
        "consistency": [0.5, 1.0],
        "harshness": [2.2, 2.8],
    },
    "log_level": "WARNING",
}


def _load_config(path: Path = _CONFIG_PATH) -> dict:
    """Load configuration from YAML file or return defaults."""
    if path.exists():
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        # Merge with defaults (config values override defaults)
        thresholds = {**_DEFAULTS["trait_thresholds"], **config.get("trait_thresholds", {})}
        return {**_DEFAULTS, **config, "trait_thresholds": thresholds}
    return _DEFAULTS


_config = _load_config()

# Sessions required before personality profiles are considered meaningful
MIN_PROFILE_SESSIONS: int = _config["min_profile_sessions"]

# Controversy bands as (exclusive upper bound, label), ascending
CONTROVERSY_LEVELS: list[tuple[int, str]] = [
    (int(bound), str(label)) for bound, label in _config["controversy_levels"]
]

# Label for scores at or above the last band
CONTROVERSY_LEVEL_MAX: str = _config["controversy_level_max"]

# Personality trait cut-offs: trait -> (low, high)
TRAIT_THRESHOLDS: dict[str, tuple[float, float]] = {
    trait: (float(low), float(high)) for trait, (low, high) in _config["trait_thresholds"].items()
}

LOG_LEVEL: str = os.getenv("COUNCIL_ANALYTICS_LOG_LEVEL", _config["log_level"]).upper()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding the engine."""
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
