"""Tests for overlay config loading."""

import pytest
from pathlib import Path

from roundcast.config import (
    DEFAULT_LABELS,
    ConfigError,
    OverlayConfig,
    default_config,
    load_config,
)

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "overlay.yaml.example"


class TestDefaults:
    def test_default_values(self):
        config = default_config()
        assert config.timers.low_time_threshold == 5.0
        assert config.leaderboard.top_n == 3
        assert config.reveal.flag_regions == 16
        assert (config.ball.save_left, config.ball.save_right) == (30.0, 70.0)

    def test_label_fallback(self):
        config = OverlayConfig(labels={})
        assert config.label("final") == "Final"
        assert config.label("no.such.key") == "no.such.key"

    def test_defaults_not_shared(self):
        a, b = default_config(), default_config()
        a.labels["final"] = "x"
        assert b.labels["final"] == DEFAULT_LABELS["final"]


class TestLoadConfig:
    def test_example_config_loads(self):
        config = load_config(EXAMPLE_CONFIG)
        assert config.timers.knockout_round_timer_seconds == 15
        assert config.knockout.target_score == 5
        assert config.label("semifinal") == "Semifinal"

    def test_partial_config_keeps_defaults(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("leaderboard:\n  top_n: 5\nlabels:\n  final: Babak Final\n")
        config = load_config(path)
        assert config.leaderboard.top_n == 5
        assert config.timers.round_timer_seconds == 30.0
        assert config.label("final") == "Babak Final"
        assert config.label("semifinal") == "Semifinal"

    def test_null_label_keeps_default(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("labels:\n  final:\n  semifinal: Semi\n")
        config = load_config(path)
        assert config.label("final") == "Final"
        assert config.label("semifinal") == "Semi"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("")
        assert load_config(path).leaderboard.top_n == 3

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_number_rejected(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("timers:\n  round_timer_seconds: soon\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_negative_top_n_rejected(self, tmp_path):
        path = tmp_path / "overlay.yaml"
        path.write_text("leaderboard:\n  top_n: -1\n")
        with pytest.raises(ConfigError):
            load_config(path)
