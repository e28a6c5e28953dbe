"""Game-mode content dispatch.

Each GameMode maps to exactly one ContentKind, and each kind to exactly
one resolver. Both tables are checked for totality at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from roundcast.reveal import RegionOverlay, RevealView, region_overlay, reveal_view
from roundcast.snapshot import GameMode, GameSnapshot, RoundContent


class ContentKind(str, Enum):
    SCRAMBLED_WORD = "scrambled_word"
    FLAG = "flag"
    LETTER_CATEGORY = "letter_category"
    TRIVIA = "trivia"
    CITY = "city"
    STADIUM = "stadium"


MODE_KINDS: dict[GameMode, ContentKind] = {
    GameMode.GUESS_THE_WORD: ContentKind.SCRAMBLED_WORD,
    GameMode.GUESS_THE_FRUIT: ContentKind.SCRAMBLED_WORD,
    GameMode.GUESS_THE_ANIMAL: ContentKind.SCRAMBLED_WORD,
    GameMode.ZONA_FILM: ContentKind.SCRAMBLED_WORD,
    GameMode.GUESS_THE_FLAG: ContentKind.FLAG,
    GameMode.ABC_5_DASAR: ContentKind.LETTER_CATEGORY,
    GameMode.TRIVIA: ContentKind.TRIVIA,
    GameMode.KPOP_TRIVIA: ContentKind.TRIVIA,
    GameMode.TRIVIA_BOLA: ContentKind.TRIVIA,
    GameMode.GUESS_THE_CITY: ContentKind.CITY,
    GameMode.ZONA_BOLA: ContentKind.STADIUM,
}


@dataclass(frozen=True)
class ContentView:
    kind: ContentKind
    available: bool
    heading: str | None = None
    letter: str | None = None
    flag_code: str | None = None
    # only set once the round is over
    answer: str | None = None
    answer_detail: str | None = None
    letters: RevealView | None = None
    flag_overlay: RegionOverlay | None = None


@dataclass(frozen=True)
class _Ctx:
    content: RoundContent
    round_active: bool
    letters: RevealView
    flag_overlay: RegionOverlay


def _after_round(ctx: _Ctx, value: str | None) -> str | None:
    return None if ctx.round_active else value


def _scrambled_word(ctx: _Ctx) -> ContentView:
    c = ctx.content
    return ContentView(
        kind=ContentKind.SCRAMBLED_WORD,
        available=bool(c.word),
        heading=c.word_category,
        answer=_after_round(ctx, c.word),
        letters=ctx.letters,
    )


def _flag(ctx: _Ctx) -> ContentView:
    c = ctx.content
    return ContentView(
        kind=ContentKind.FLAG,
        available=bool(c.country_code),
        heading="Guess the name of this flag",
        flag_code=c.country_code,
        answer=_after_round(ctx, c.country_name),
        letters=ctx.letters,
        flag_overlay=ctx.flag_overlay,
    )


def _letter_category(ctx: _Ctx) -> ContentView:
    c = ctx.content
    return ContentView(
        kind=ContentKind.LETTER_CATEGORY,
        available=bool(c.letter and c.category),
        heading=c.category,
        letter=c.letter,
    )


def _trivia(ctx: _Ctx) -> ContentView:
    c = ctx.content
    return ContentView(
        kind=ContentKind.TRIVIA,
        available=bool(c.question),
        heading=c.question,
        answer=_after_round(ctx, c.answer),
        letters=ctx.letters,
    )


def _city(ctx: _Ctx) -> ContentView:
    c = ctx.content
    return ContentView(
        kind=ContentKind.CITY,
        available=bool(c.city_name),
        heading="Guess the city name",
        answer=_after_round(ctx, c.city_name),
        answer_detail=_after_round(ctx, c.city_region),
        letters=ctx.letters,
    )


def _stadium(ctx: _Ctx) -> ContentView:
    c = ctx.content
    answer = c.word or c.stadium_name
    return ContentView(
        kind=ContentKind.STADIUM,
        available=bool(answer),
        heading=c.word_category,
        answer=_after_round(ctx, answer),
        answer_detail=_after_round(ctx, c.stadium_location),
        letters=ctx.letters,
    )


_RESOLVERS: dict[ContentKind, Callable[[_Ctx], ContentView]] = {
    ContentKind.SCRAMBLED_WORD: _scrambled_word,
    ContentKind.FLAG: _flag,
    ContentKind.LETTER_CATEGORY: _letter_category,
    ContentKind.TRIVIA: _trivia,
    ContentKind.CITY: _city,
    ContentKind.STADIUM: _stadium,
}

_missing_modes = set(GameMode) - set(MODE_KINDS)
_missing_kinds = set(ContentKind) - set(_RESOLVERS)
if _missing_modes or _missing_kinds:
    raise RuntimeError(
        f"Content dispatch not total: modes={_missing_modes} kinds={_missing_kinds}"
    )


def resolve_content(
    snapshot: GameSnapshot,
    hard_mode: bool | None = None,
    region_count: int = 16,
) -> ContentView | None:
    """Build the content view for the snapshot's mode.

    ``hard_mode`` overrides the snapshot flag; knockout questions pass
    False so they are always fully shown.
    """
    if snapshot.mode is None:
        return None
    enabled = snapshot.hard_mode if hard_mode is None else hard_mode
    ctx = _Ctx(
        content=snapshot.content,
        round_active=snapshot.round_active,
        letters=reveal_view(
            snapshot.concealable_groups,
            snapshot.reveal_level,
            enabled,
            snapshot.round_active,
        ),
        flag_overlay=region_overlay(
            snapshot.reveal_level, enabled, snapshot.round_active, region_count
        ),
    )
    return _RESOLVERS[MODE_KINDS[snapshot.mode]](ctx)
