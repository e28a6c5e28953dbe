"""Overview — compose one OverlayFrame from a GameSnapshot.

Fans the snapshot out to the projectors and collects their results. Pure:
the same snapshot and config always give the same frame, so it is safe to
call on every tick.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum

from roundcast.ball import BallRender, project_ball
from roundcast.bracket import bracket_is_well_formed, current_match, round_title
from roundcast.config import OverlayConfig, default_config
from roundcast.content import ContentView, resolve_content
from roundcast.core.sanitizer import sanitize_name, sanitize_text
from roundcast.leaderboard import top_n
from roundcast.progress import (
    RoundsProgress,
    TimerProgress,
    header_line,
    rounds_progress,
    timer_duration,
    timer_progress,
    winners_quota,
)
from roundcast.snapshot import GameSnapshot, GameStyle, LeaderboardEntry, Player
from roundcast.turns import find_player, resolve_roles, roles_consistent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerBadge:
    id: str
    display_name: str
    avatar_ref: str | None
    points: int
    is_defender: bool
    is_attacker: bool


@dataclass(frozen=True)
class KnockoutView:
    match_id: str
    player1: PlayerBadge
    player2: PlayerBadge
    ball: BallRender
    defender_name: str | None
    commentary: str
    question: ContentView | None


@dataclass(frozen=True)
class LeaderboardRow:
    user_id: str
    display_name: str
    avatar_ref: str | None
    score: int


@dataclass(frozen=True)
class OverlayFrame:
    style: GameStyle
    header: str
    title: str
    round_active: bool
    timer: TimerProgress
    rounds: RoundsProgress
    top_likers: tuple[LeaderboardRow, ...] = ()
    top_gifters: tuple[LeaderboardRow, ...] = ()
    content: ContentView | None = None
    knockout: KnockoutView | None = None
    winners_found: int = 0
    winners_quota: int = 0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return asdict(self, dict_factory=_enum_safe_dict)


def _enum_safe_dict(items) -> dict:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in items}


def _rows(entries: tuple[LeaderboardEntry, ...], n: int) -> tuple[LeaderboardRow, ...]:
    return tuple(
        LeaderboardRow(
            user_id=e.user_id,
            display_name=sanitize_name(e.display_name),
            avatar_ref=e.avatar_ref,
            score=e.score,
        )
        for e in top_n(entries, n)
    )


def _badge(player: Player, points: int, roles, round_active: bool) -> PlayerBadge:
    return PlayerBadge(
        id=player.id,
        display_name=sanitize_name(player.display_name),
        avatar_ref=player.avatar_ref,
        points=points,
        # defender ring only while a round is running
        is_defender=round_active and roles.is_defender(player.id),
        is_attacker=roles.is_attacker(player.id),
    )


def _knockout_view(
    snapshot: GameSnapshot, config: OverlayConfig, warnings: list[str]
) -> KnockoutView | None:
    match = current_match(
        snapshot.bracket, snapshot.current_round_index, snapshot.current_match_index
    )
    if match is None or not match.is_filled:
        return None

    # Roles stay visible between rounds (attacker border); the defender
    # ring and banner are gated on round_active separately.
    roles = resolve_roles(match, snapshot.contest, round_active=True)
    if not roles.has_defender and snapshot.contest.defender_id is not None:
        warnings.append(f"defender {snapshot.contest.defender_id!r} not in match {match.id!r}")
    if roles.stale_attacker:
        warnings.append(f"stale attacker_id {snapshot.contest.attacker_id!r}")
    if not roles_consistent(match, roles):
        warnings.append(f"inconsistent roles in match {match.id!r}")

    defender = None
    if snapshot.round_active:
        defender = find_player(snapshot.knockout_players, roles.defender_id)
        if defender is None:
            defender = find_player((match.player1, match.player2), roles.defender_id)

    points_a, points_b = snapshot.match_points
    question = None
    if snapshot.round_active:
        question = resolve_content(
            snapshot, hard_mode=False, region_count=config.reveal.flag_regions
        )

    return KnockoutView(
        match_id=match.id,
        player1=_badge(match.player1, points_a, roles, snapshot.round_active),
        player2=_badge(match.player2, points_b, roles, snapshot.round_active),
        ball=project_ball(snapshot.contest, config.ball),
        defender_name=sanitize_name(defender.display_name) if defender else None,
        commentary=sanitize_text(snapshot.contest.commentary),
        question=question,
    )


def compose_frame(snapshot: GameSnapshot, config: OverlayConfig | None = None) -> OverlayFrame:
    """Project a snapshot into everything the overlay shows this tick."""
    config = config or default_config()
    warnings: list[str] = []

    knockout = None
    content = None
    if snapshot.style is GameStyle.KNOCKOUT:
        if snapshot.bracket is not None and not bracket_is_well_formed(snapshot.bracket):
            warnings.append("bracket rounds do not halve down to a single final")
        knockout = _knockout_view(snapshot, config, warnings)

    # Classic content also stands in when knockout has no playable match
    if knockout is None:
        content = resolve_content(snapshot, region_count=config.reveal.flag_regions)

    for w in warnings:
        logger.warning("Snapshot: %s", w)

    return OverlayFrame(
        style=snapshot.style,
        header=header_line(snapshot, config),
        title=round_title(
            snapshot.style,
            snapshot.mode,
            snapshot.knockout_category,
            snapshot.bracket,
            snapshot.current_round_index,
            config,
        ),
        round_active=snapshot.round_active,
        timer=timer_progress(
            snapshot.round_elapsed,
            timer_duration(snapshot, config),
            config.timers.low_time_threshold,
        ),
        rounds=rounds_progress(snapshot.style, snapshot.current_round, snapshot.total_rounds),
        top_likers=_rows(snapshot.like_ranking, config.leaderboard.top_n),
        top_gifters=_rows(snapshot.gift_ranking, config.leaderboard.top_n),
        content=content,
        knockout=knockout,
        winners_found=snapshot.round_winners,
        winners_quota=winners_quota(
            snapshot.mode, snapshot.max_winners, snapshot.available_answers_count
        ),
        warnings=tuple(warnings),
    )
