"""Bracket label resolver and knockout bracket lookups.

Every input maps to some label: an explicit knockout category wins, then
the match count of the current bracket round, then a generic fallback.
Nothing here raises on a malformed bracket.
"""

from __future__ import annotations

from roundcast.config import OverlayConfig, default_config
from roundcast.snapshot import (
    Bracket,
    GameMode,
    GameStyle,
    KnockoutCategory,
    Match,
)


# ── Round labels ─────────────────────────────────────────────────

_ROUND_LABELS = {
    1: "final",
    2: "semifinal",
    4: "quarterfinal",
    8: "round_of_16",
}

_CATEGORY_LABELS = {c: f"category.{c.value}" for c in KnockoutCategory}
_MODE_TITLES = {m: f"mode.{m.value}" for m in GameMode}


def _round_at(bracket: Bracket | None, round_index: int | None):
    if bracket is None or round_index is None:
        return None
    if round_index < 0 or round_index >= len(bracket):
        return None
    return bracket[round_index]


def bracket_label(
    category: KnockoutCategory | None,
    bracket: Bracket | None,
    round_index: int | None,
    config: OverlayConfig | None = None,
) -> str:
    """Human-readable name for the current knockout round."""
    config = config or default_config()

    if category is not None:
        return config.label(_CATEGORY_LABELS[category])

    matches = _round_at(bracket, round_index)
    if matches is None:
        return config.label("knockout_mode")

    key = _ROUND_LABELS.get(len(matches), "group_stage")
    return config.label(key)


def classic_title(mode: GameMode | None, config: OverlayConfig | None = None) -> str:
    config = config or default_config()
    if mode is None:
        return ""
    return config.label(_MODE_TITLES[mode])


def round_title(
    style: GameStyle,
    mode: GameMode | None,
    category: KnockoutCategory | None,
    bracket: Bracket | None,
    round_index: int | None,
    config: OverlayConfig | None = None,
) -> str:
    """Title line of the overlay header."""
    if style is GameStyle.KNOCKOUT:
        return bracket_label(category, bracket, round_index, config)
    return classic_title(mode, config)


# ── Lookups ──────────────────────────────────────────────────────

def current_match(
    bracket: Bracket | None,
    round_index: int | None,
    match_index: int | None,
) -> Match | None:
    """Return bracket[round][match], or None when either index misses."""
    matches = _round_at(bracket, round_index)
    if matches is None or match_index is None:
        return None
    if match_index < 0 or match_index >= len(matches):
        return None
    return matches[match_index]


def bracket_is_well_formed(bracket: Bracket | None) -> bool:
    """Each round halves the previous one and the last has one match."""
    if not bracket:
        return False
    counts = [len(r) for r in bracket]
    if counts[-1] != 1:
        return False
    for prev, nxt in zip(counts, counts[1:]):
        if prev != nxt * 2:
            return False
    return True
