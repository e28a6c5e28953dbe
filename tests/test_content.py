"""Tests for game-mode content dispatch."""

import pytest

from builders import make_groups
from roundcast.content import MODE_KINDS, ContentKind, resolve_content
from roundcast.snapshot import GameMode, GameSnapshot, RoundContent


def _snap(mode, active=True, **content):
    return GameSnapshot(
        mode=mode,
        round_active=active,
        hard_mode=True,
        reveal_level=1,
        concealable_groups=make_groups("ABC"),
        content=RoundContent(**content),
    )


class TestDispatchTable:
    def test_every_mode_has_a_kind(self):
        assert set(MODE_KINDS) == set(GameMode)

    def test_every_kind_is_reachable(self):
        assert set(MODE_KINDS.values()) == set(ContentKind)

    @pytest.mark.parametrize("mode", list(GameMode))
    def test_every_mode_resolves(self, mode):
        view = resolve_content(_snap(mode))
        assert view.kind == MODE_KINDS[mode]

    def test_no_mode(self):
        assert resolve_content(GameSnapshot()) is None


class TestResolvers:
    def test_word_answer_hidden_while_active(self):
        view = resolve_content(_snap(GameMode.GUESS_THE_FRUIT, word="ABC", word_category="Fruit"))
        assert view.available
        assert view.heading == "Fruit"
        assert view.answer is None
        assert view.letters.revealed_count == 1

    def test_word_answer_shown_after_round(self):
        view = resolve_content(_snap(GameMode.GUESS_THE_WORD, active=False, word="ABC"))
        assert view.answer == "ABC"
        assert all(view.letters.visibility().values())

    def test_flag_has_overlay(self):
        view = resolve_content(_snap(GameMode.GUESS_THE_FLAG, country_code="fr", country_name="France"))
        assert view.flag_code == "fr"
        assert view.flag_overlay.active
        assert view.answer is None

    def test_flag_region_count(self):
        snap = _snap(GameMode.GUESS_THE_FLAG, country_code="fr")
        view = resolve_content(snap, region_count=9)
        assert len(view.flag_overlay.regions) == 9

    def test_trivia_missing_question(self):
        view = resolve_content(_snap(GameMode.KPOP_TRIVIA))
        assert view.kind is ContentKind.TRIVIA
        assert view.available is False

    def test_letter_category(self):
        view = resolve_content(_snap(GameMode.ABC_5_DASAR, letter="M", category="Animals"))
        assert view.letter == "M"
        assert view.heading == "Animals"
        assert view.letters is None

    def test_city_detail_after_round(self):
        view = resolve_content(
            _snap(GameMode.GUESS_THE_CITY, active=False, city_name="Bandung", city_region="West Java")
        )
        assert view.answer == "Bandung"
        assert view.answer_detail == "West Java"

    def test_stadium_falls_back_to_stadium_name(self):
        view = resolve_content(
            _snap(GameMode.ZONA_BOLA, active=False, stadium_name="Anfield", stadium_location="Liverpool")
        )
        assert view.answer == "Anfield"
        assert view.answer_detail == "Liverpool"

    def test_hard_mode_override(self):
        view = resolve_content(_snap(GameMode.TRIVIA, question="Q?"), hard_mode=False)
        assert all(view.letters.visibility().values())
        assert not view.flag_overlay.active
