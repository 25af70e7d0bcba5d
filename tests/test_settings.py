"""
Tests for configuration loading.
"""

from council_analytics import settings


def test_defaults_without_config_file(tmp_path):
    config = settings._load_config(tmp_path / "missing.yaml")

    assert config["min_profile_sessions"] == 3
    assert config["trait_thresholds"]["confidence"] == [1.5, 2.2]


def test_config_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("min_profile_sessions: 5\ntrait_thresholds:\n  harshness: [2.0, 3.0]\n")

    config = settings._load_config(path)

    assert config["min_profile_sessions"] == 5
    assert config["trait_thresholds"]["harshness"] == [2.0, 3.0]
    # Unmentioned thresholds keep their defaults
    assert config["trait_thresholds"]["consistency"] == [0.5, 1.0]
    assert config["log_level"] == "WARNING"


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert settings._load_config(path)["min_profile_sessions"] == 3


def test_module_constants():
    assert settings.CONTROVERSY_LEVELS[0] == (20, "Strong Consensus")
    assert settings.TRAIT_THRESHOLDS["consistency"] == (0.5, 1.0)
