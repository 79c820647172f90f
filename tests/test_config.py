"""Tests for engine configuration."""

from pathlib import Path

import pytest

from pantrypilot.core.config import EngineConfig, ExpirationThresholds, load_config


def test_default_thresholds() -> None:
    thresholds = ExpirationThresholds()
    assert (thresholds.critical_days, thresholds.warning_days, thresholds.upcoming_days) == (
        3,
        7,
        14,
    )


@pytest.mark.parametrize("values", [(-1, 7, 14), (5, 3, 14), (3, 7, 6)])
def test_invalid_thresholds_rejected(values: tuple[int, int, int]) -> None:
    with pytest.raises(ValueError):
        ExpirationThresholds(*values)


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "nope.yaml")
    assert config == EngineConfig()
    assert load_config(None) == EngineConfig()


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text(
        "thresholds:\n"
        "  critical_days: 1\n"
        "  warning_days: 3\n"
        "  upcoming_days: 7\n"
        "min_match_score: 0.25\n"
        "max_suggestions: 3\n"
        "include_upcoming_in_suggestions: true\n"
        "fuzzy_match_threshold: 90\n"
        "unrelated_key: 1\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.thresholds == ExpirationThresholds(1, 3, 7)
    assert config.min_match_score == 0.25
    assert config.max_suggestions == 3
    assert config.include_upcoming_in_suggestions is True
    assert config.fuzzy_match_threshold == 90


def test_load_config_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == EngineConfig()


def test_load_config_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("thresholds:\n  critical_days: 9\n  warning_days: 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)

    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_suggestion_tiers_default_and_horizon() -> None:
    config = EngineConfig()
    assert config.suggestion_thresholds == ExpirationThresholds(1, 3, 7)
    assert config.suggestion_horizon_days == 7
    assert EngineConfig(include_upcoming_in_suggestions=True).suggestion_horizon_days == 14


def test_load_suggestion_tiers_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "engine.yaml"
    path.write_text("suggestion_thresholds:\n  critical_days: 2\n", encoding="utf-8")
    config = load_config(path)
    assert config.suggestion_thresholds == ExpirationThresholds(2, 3, 7)
    assert config.thresholds == ExpirationThresholds()

    path.write_text("suggestion_thresholds: [1, 3, 7]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
