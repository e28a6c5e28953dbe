"""Overlay configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path


class ConfigError(ValueError):
    """Raised when an overlay config file cannot be used."""


DEFAULT_LABELS = {
    # bracket shape
    "final": "Final",
    "semifinal": "Semifinal",
    "quarterfinal": "Quarterfinal",
    "round_of_16": "Round of 16",
    "group_stage": "group stage",
    "knockout_mode": "knockout mode",
    # knockout category overrides
    "category.trivia": "General Trivia",
    "category.guess_the_country": "Guess the Country",
    "category.zona_bola": "Football Zone",
    "category.trivia_bola": "Football Trivia",
    "category.guess_the_fruit": "Guess the Word: Fruit",
    "category.guess_the_animal": "Guess the Word: Animal",
    "category.kpop_trivia": "Trivia: K-Pop Zone",
    "category.zona_film": "Film Zone",
    # classic mode titles
    "mode.guess_the_word": "Scrambled Word",
    "mode.guess_the_flag": "Guess the Flag",
    "mode.guess_the_city": "Guess the City",
    "mode.abc_5_dasar": "ABC 5 Basics",
    "mode.trivia": "General Trivia",
    "mode.zona_bola": "Football Zone",
    "mode.trivia_bola": "Football Trivia",
    "mode.guess_the_fruit": "Guess the Fruit",
    "mode.guess_the_animal": "Guess the Animal",
    "mode.kpop_trivia": "Trivia: K-Pop Zone",
    "mode.zona_film": "Film Zone",
}


@dataclass
class TimerConfig:
    round_timer_seconds: float = 30.0
    knockout_round_timer_seconds: float = 15.0
    low_time_threshold: float = 5.0


@dataclass
class KnockoutConfig:
    target_score: int = 5


@dataclass
class RevealConfig:
    flag_regions: int = 16  # 4x4 grid, row-major


@dataclass
class BallConfig:
    center: float = 50.0
    save_left: float = 30.0
    save_right: float = 70.0


@dataclass
class LeaderboardConfig:
    top_n: int = 3


@dataclass
class OverlayConfig:
    timers: TimerConfig = field(default_factory=TimerConfig)
    knockout: KnockoutConfig = field(default_factory=KnockoutConfig)
    reveal: RevealConfig = field(default_factory=RevealConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    leaderboard: LeaderboardConfig = field(default_factory=LeaderboardConfig)
    labels: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LABELS))

    def label(self, key: str) -> str:
        return self.labels.get(key, DEFAULT_LABELS.get(key, key))


def default_config() -> OverlayConfig:
    return OverlayConfig()


def load_config(path: Path) -> OverlayConfig:
    """Load overlay config from YAML file. Missing sections keep defaults."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    timers = raw.get("timers", {})
    knockout = raw.get("knockout", {})
    reveal = raw.get("reveal", {})
    ball = raw.get("ball", {})
    leaderboard = raw.get("leaderboard", {})

    labels = dict(DEFAULT_LABELS)
    labels_raw = raw.get("labels") or {}
    if not isinstance(labels_raw, dict):
        raise ConfigError(f"{path}: 'labels' must be a mapping")
    labels.update({str(k): str(v) for k, v in labels_raw.items() if v is not None})

    try:
        config = OverlayConfig(
            timers=TimerConfig(
                round_timer_seconds=float(timers.get("round_timer_seconds", 30.0)),
                knockout_round_timer_seconds=float(
                    timers.get("knockout_round_timer_seconds", 15.0)
                ),
                low_time_threshold=float(timers.get("low_time_threshold", 5.0)),
            ),
            knockout=KnockoutConfig(
                target_score=int(knockout.get("target_score", 5)),
            ),
            reveal=RevealConfig(
                flag_regions=int(reveal.get("flag_regions", 16)),
            ),
            ball=BallConfig(
                center=float(ball.get("center", 50.0)),
                save_left=float(ball.get("save_left", 30.0)),
                save_right=float(ball.get("save_right", 70.0)),
            ),
            leaderboard=LeaderboardConfig(
                top_n=int(leaderboard.get("top_n", 3)),
            ),
            labels=labels,
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f"{path}: {e}") from e

    if config.leaderboard.top_n < 0:
        raise ConfigError(f"{path}: leaderboard.top_n must be >= 0")
    if config.reveal.flag_regions <= 0:
        raise ConfigError(f"{path}: reveal.flag_regions must be > 0")

    return config
