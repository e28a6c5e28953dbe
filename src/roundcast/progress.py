"""Progress projector: round timer, rounds bar, header line, winners quota."""

from __future__ import annotations

from dataclasses import dataclass

from roundcast.config import OverlayConfig, default_config
from roundcast.snapshot import GameMode, GameSnapshot, GameStyle

LOW_TIME_THRESHOLD = 5.0


@dataclass(frozen=True)
class TimerProgress:
    ratio: float            # elapsed / total
    remaining: float
    remaining_ratio: float  # what the shrinking timer bar shows
    urgent: bool


@dataclass(frozen=True)
class RoundsProgress:
    previous_ratio: float
    ratio: float
    indeterminate: bool


def _ratio(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return max(0.0, min(1.0, part / whole))


def progress(elapsed: float, total: float) -> float:
    """elapsed / total clamped to [0, 1]; a zero-length timer is 0."""
    return _ratio(elapsed, total)


def timer_progress(
    elapsed: float, total: float, low_time_threshold: float = LOW_TIME_THRESHOLD
) -> TimerProgress:
    if total <= 0:
        return TimerProgress(ratio=0.0, remaining=0.0, remaining_ratio=0.0, urgent=False)
    remaining = max(total - max(elapsed, 0.0), 0.0)
    return TimerProgress(
        ratio=progress(elapsed, total),
        remaining=remaining,
        remaining_ratio=_ratio(remaining, total),
        urgent=remaining <= low_time_threshold,
    )


def rounds_progress(style: GameStyle, current_round: int, total_rounds: int) -> RoundsProgress:
    """Across-rounds bar. Knockout has no fixed round count: full bar."""
    if style is GameStyle.KNOCKOUT:
        return RoundsProgress(previous_ratio=1.0, ratio=1.0, indeterminate=True)
    return RoundsProgress(
        previous_ratio=_ratio(current_round - 1, total_rounds),
        ratio=_ratio(current_round, total_rounds),
        indeterminate=False,
    )


def timer_duration(snapshot: GameSnapshot, config: OverlayConfig) -> float:
    if snapshot.round_total is not None:
        return snapshot.round_total
    if snapshot.style is GameStyle.KNOCKOUT:
        return config.timers.knockout_round_timer_seconds
    return config.timers.round_timer_seconds


def header_line(snapshot: GameSnapshot, config: OverlayConfig | None = None) -> str:
    config = config or default_config()
    if snapshot.style is GameStyle.KNOCKOUT:
        return f"Rally Point (Target {config.knockout.target_score})"
    return f"Round {snapshot.current_round} / {snapshot.total_rounds}"


def winners_quota(mode: GameMode | None, max_winners: int, available_answers: int | None) -> int:
    """ABC 5 Dasar caps winners at the number of valid answers."""
    if mode is GameMode.ABC_5_DASAR and available_answers is not None:
        return max(min(max_winners, available_answers), 0)
    return max(max_winners, 0)
