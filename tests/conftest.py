"""Shared test fixtures for roundcast."""

import pytest

from builders import make_entries, make_groups
from roundcast.snapshot import (
    ContestAction,
    ContestState,
    GameMode,
    GameSnapshot,
    GameStyle,
    Match,
    Player,
    RoundContent,
)


@pytest.fixture
def alice():
    return Player(id="alice", display_name="Alice")


@pytest.fixture
def bob():
    return Player(id="bob", display_name="Bob")


@pytest.fixture
def match(alice, bob):
    return Match(id="m1", player1=alice, player2=bob)


@pytest.fixture
def semifinal_bracket(match):
    other = Match(id="m2", player1=Player("carol", "Carol"), player2=Player("dave", "Dave"))
    return ((match, other), (Match(id="final"),))


@pytest.fixture
def knockout_snapshot(alice, bob, semifinal_bracket):
    return GameSnapshot(
        style=GameStyle.KNOCKOUT,
        mode=GameMode.TRIVIA,
        round_active=True,
        hard_mode=True,
        reveal_level=0,
        concealable_groups=make_groups("PARIS"),
        content=RoundContent(question="Capital of France?", answer="Paris"),
        bracket=semifinal_bracket,
        current_round_index=0,
        current_match_index=0,
        knockout_players=(alice, bob),
        contest=ContestState(
            action=ContestAction.ATTACK,
            attacker_id="bob",
            defender_id="alice",
            ball_position=35.0,
            commentary="Bob pushes forward",
        ),
        match_points=(2, 1),
        round_elapsed=5.0,
    )


@pytest.fixture
def classic_snapshot():
    return GameSnapshot(
        style=GameStyle.CLASSIC,
        mode=GameMode.GUESS_THE_WORD,
        round_active=True,
        hard_mode=True,
        reveal_level=3,
        concealable_groups=make_groups("APPLE", "PIE"),
        content=RoundContent(word="APPLE PIE", word_category="Food"),
        current_round=3,
        total_rounds=10,
        round_elapsed=12.0,
        round_winners=1,
        max_winners=5,
        gift_ranking=make_entries(5),
        like_ranking=make_entries(1),
    )
