"""Tests for the ball/action projector."""

import pytest

from roundcast.ball import VERTICAL_CENTER, project_ball
from roundcast.config import BallConfig
from roundcast.snapshot import ContestAction, ContestState


class TestProjectBall:
    def test_idle_passes_position_through(self):
        render = project_ball(ContestState(action=ContestAction.IDLE, ball_position=42))
        assert render.horizontal_position == 42
        assert render.vertical_anchor == VERTICAL_CENTER

    @pytest.mark.parametrize("action", [ContestAction.ATTACK, ContestAction.DEFEND, ContestAction.SCORE])
    def test_other_actions_pass_through(self, action):
        assert project_ball(ContestState(action=action, ball_position=88)).horizontal_position == 88

    def test_save_left_of_center(self):
        render = project_ball(ContestState(action=ContestAction.SAVE, ball_position=20))
        assert render.horizontal_position == 30

    def test_save_right_of_center(self):
        render = project_ball(ContestState(action=ContestAction.SAVE, ball_position=80))
        assert render.horizontal_position == 70

    def test_save_exactly_center_goes_right(self):
        render = project_ball(ContestState(action=ContestAction.SAVE, ball_position=50))
        assert render.horizontal_position == 70

    def test_out_of_range_clamped(self):
        assert project_ball(ContestState(ball_position=130)).horizontal_position == 100
        assert project_ball(ContestState(ball_position=-5)).horizontal_position == 0

    def test_no_contest_is_centered(self):
        render = project_ball(None)
        assert render.horizontal_position == 50
        assert render.action is ContestAction.IDLE

    def test_custom_rebound_points(self):
        config = BallConfig(save_left=25, save_right=75)
        render = project_ball(ContestState(action=ContestAction.SAVE, ball_position=10), config)
        assert render.horizontal_position == 25
