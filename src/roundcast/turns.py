"""Turn/role resolver for the knockout mini-game.

The defender is the only player allowed to answer. ``defender_id`` is the
source of truth; the attacker is recomputed as "the other roster player"
rather than read from the snapshot's denormalized ``attacker_id``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roundcast.snapshot import ContestState, Match, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRoles:
    defender_id: str | None
    attacker_id: str | None
    # snapshot's attacker_id disagrees with the recomputed one
    stale_attacker: bool = False

    def is_defender(self, player_id: str | None) -> bool:
        return player_id is not None and player_id == self.defender_id

    def is_attacker(self, player_id: str | None) -> bool:
        return player_id is not None and player_id == self.attacker_id

    def input_eligible(self, player_id: str | None) -> bool:
        """Only the defender's answer can resolve the contest."""
        return self.is_defender(player_id)

    @property
    def has_defender(self) -> bool:
        return self.defender_id is not None


NO_ROLES = MatchRoles(defender_id=None, attacker_id=None)


def resolve_roles(
    match: Match | None,
    contest: ContestState | None,
    round_active: bool = True,
) -> MatchRoles:
    """Resolve defender/attacker for a two-player match.

    Returns NO_ROLES when there is no round, no filled match, or the
    defender id matches neither player.
    """
    if not round_active or match is None or contest is None:
        return NO_ROLES
    if not match.is_filled:
        return NO_ROLES

    p1, p2 = match.player1, match.player2
    if contest.defender_id == p1.id:
        defender, attacker = p1, p2
    elif contest.defender_id == p2.id:
        defender, attacker = p2, p1
    else:
        logger.debug(
            "Defender %r is not on roster %r/%r", contest.defender_id, p1.id, p2.id
        )
        return NO_ROLES

    stale = contest.attacker_id is not None and contest.attacker_id != attacker.id
    if stale:
        logger.debug(
            "Stale attacker_id %r, recomputed %r", contest.attacker_id, attacker.id
        )
    return MatchRoles(defender_id=defender.id, attacker_id=attacker.id, stale_attacker=stale)


def roles_consistent(match: Match | None, roles: MatchRoles) -> bool:
    """Attacker and defender differ and both are roster members (or neither is set)."""
    if not roles.has_defender:
        return roles.attacker_id is None
    if match is None or not match.is_filled:
        return False
    roster = {match.player1.id, match.player2.id}
    return (
        roles.defender_id in roster
        and roles.attacker_id in roster
        and roles.defender_id != roles.attacker_id
    )


def find_player(players: tuple[Player, ...] | list[Player], player_id: str | None) -> Player | None:
    if player_id is None:
        return None
    for p in players:
        if p.id == player_id:
            return p
    return None
