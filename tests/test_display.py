"""Smoke tests for the rich terminal preview."""

import io
from dataclasses import replace

from rich.console import Console

from roundcast.display import make_bar, render
from roundcast.overview import compose_frame
from roundcast.snapshot import GameSnapshot


def _render_text(frame) -> str:
    buf = io.StringIO()
    Console(file=buf, width=100, color_system=None).print(render(frame))
    return buf.getvalue()


class TestRender:
    def test_classic(self, classic_snapshot):
        text = _render_text(compose_frame(classic_snapshot))
        assert "Round 3 / 10" in text
        assert "[A]" in text
        assert "User 0" in text

    def test_knockout(self, knockout_snapshot):
        text = _render_text(compose_frame(knockout_snapshot))
        assert "Semifinal" in text
        assert "TO ANSWER" in text
        assert "Alice" in text

    def test_empty_snapshot(self):
        text = _render_text(compose_frame(GameSnapshot()))
        assert "waiting for question" in text
        assert "No gifts yet." in text

    def test_round_over_shows_answer(self, classic_snapshot):
        text = _render_text(compose_frame(replace(classic_snapshot, round_active=False)))
        assert "APPLE PIE" in text


class TestMakeBar:
    def test_width(self):
        assert len(make_bar(0.5, "cyan", width=10).plain) == 10

    def test_clamped(self):
        assert make_bar(3.0, "cyan", width=4).plain == "████"
