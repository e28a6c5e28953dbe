"""Snapshot data model — read-only projection of the authoritative game state.

Everything here is immutable. The authoritative owner (the game loop that
listens to the livestream) builds a new GameSnapshot on every tick; the
projection modules only read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameStyle(str, Enum):
    CLASSIC = "classic"
    KNOCKOUT = "knockout"


class GameMode(str, Enum):
    GUESS_THE_WORD = "guess_the_word"
    GUESS_THE_FLAG = "guess_the_flag"
    GUESS_THE_CITY = "guess_the_city"
    ABC_5_DASAR = "abc_5_dasar"
    TRIVIA = "trivia"
    ZONA_BOLA = "zona_bola"
    TRIVIA_BOLA = "trivia_bola"
    GUESS_THE_FRUIT = "guess_the_fruit"
    GUESS_THE_ANIMAL = "guess_the_animal"
    KPOP_TRIVIA = "kpop_trivia"
    ZONA_FILM = "zona_film"


class KnockoutCategory(str, Enum):
    """Fixed category selected for a whole knockout stage."""

    TRIVIA = "trivia"
    GUESS_THE_COUNTRY = "guess_the_country"
    ZONA_BOLA = "zona_bola"
    TRIVIA_BOLA = "trivia_bola"
    GUESS_THE_FRUIT = "guess_the_fruit"
    GUESS_THE_ANIMAL = "guess_the_animal"
    KPOP_TRIVIA = "kpop_trivia"
    ZONA_FILM = "zona_film"


class ContestAction(str, Enum):
    IDLE = "idle"
    ATTACK = "attack"
    DEFEND = "defend"
    SAVE = "save"
    SCORE = "score"


@dataclass(frozen=True)
class Player:
    id: str
    display_name: str
    avatar_ref: str | None = None


@dataclass(frozen=True)
class ConcealableUnit:
    """One letter tile (or image region) that hard mode may hide."""

    id: str
    value: str


@dataclass(frozen=True)
class Match:
    id: str
    player1: Player | None = None
    player2: Player | None = None

    @property
    def is_filled(self) -> bool:
        return self.player1 is not None and self.player2 is not None


@dataclass(frozen=True)
class ContestState:
    """Knockout mini-game state. ``attacker_id`` is denormalized."""

    action: ContestAction = ContestAction.IDLE
    attacker_id: str | None = None
    defender_id: str | None = None
    ball_position: float = 50.0
    commentary: str = ""


@dataclass(frozen=True)
class LeaderboardEntry:
    user_id: str
    display_name: str
    avatar_ref: str | None = None
    score: int = 0


@dataclass(frozen=True)
class RoundContent:
    """Trivia content for the current round, whichever fields the mode uses."""

    word: str | None = None
    word_category: str | None = None
    letter: str | None = None
    category: str | None = None
    question: str | None = None
    answer: str | None = None
    country_name: str | None = None
    country_code: str | None = None
    city_name: str | None = None
    city_region: str | None = None
    stadium_name: str | None = None
    stadium_location: str | None = None


# A bracket is a tuple of rounds; each round is a tuple of matches.
Bracket = tuple[tuple[Match, ...], ...]
ConcealableGroups = tuple[tuple[ConcealableUnit, ...], ...]


@dataclass(frozen=True)
class GameSnapshot:
    style: GameStyle = GameStyle.CLASSIC
    mode: GameMode | None = None
    round_active: bool = False

    # hard mode
    hard_mode: bool = False
    reveal_level: int = 0
    concealable_groups: ConcealableGroups = ()

    content: RoundContent = field(default_factory=RoundContent)

    # knockout
    knockout_category: KnockoutCategory | None = None
    bracket: Bracket | None = None
    current_round_index: int | None = None
    current_match_index: int | None = None
    knockout_players: tuple[Player, ...] = ()
    contest: ContestState = field(default_factory=ContestState)
    match_points: tuple[int, int] = (0, 0)

    # timers / rounds
    round_elapsed: float = 0.0
    round_total: float | None = None
    current_round: int = 0
    total_rounds: int = 0

    # classic winners
    round_winners: int = 0
    max_winners: int = 0
    available_answers_count: int | None = None

    gift_ranking: tuple[LeaderboardEntry, ...] = ()
    like_ranking: tuple[LeaderboardEntry, ...] = ()
