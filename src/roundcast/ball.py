"""Ball/action projector for the knockout pitch.

Position is a 0-100 horizontal percentage, left to right. During a save
the stored position is replaced by a fixed rebound point on the side the
ball was on.
"""

from __future__ import annotations

from dataclasses import dataclass

from roundcast.config import BallConfig
from roundcast.snapshot import ContestAction, ContestState

VERTICAL_CENTER = "center"


@dataclass(frozen=True)
class BallRender:
    horizontal_position: float
    vertical_anchor: str = VERTICAL_CENTER
    action: ContestAction = ContestAction.IDLE


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def project_ball(contest: ContestState | None, config: BallConfig | None = None) -> BallRender:
    config = config or BallConfig()
    if contest is None:
        return BallRender(horizontal_position=config.center)

    position = _clamp(contest.ball_position)
    if contest.action is ContestAction.SAVE:
        position = config.save_left if position < config.center else config.save_right

    return BallRender(horizontal_position=position, action=contest.action)
