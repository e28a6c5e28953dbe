"""Reveal calculator — which hard-mode units are disclosed.

Units are flattened in group order, then intra-group order, to get a
0-based global index. A unit is visible iff its index is below the reveal
level, or concealment is off (hard mode disabled or round not active).
The level itself is owned by the game loop; it is only read here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from roundcast.snapshot import ConcealableUnit


class TileSize(str, Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"


@dataclass(frozen=True)
class IndexedUnit:
    unit: ConcealableUnit
    group: int
    global_index: int
    visible: bool


@dataclass(frozen=True)
class RevealView:
    """Per-unit visibility for one render pass, grouped like the input."""

    groups: tuple[tuple[IndexedUnit, ...], ...]
    total_units: int
    revealed_count: int
    show_clue_hint: bool
    tile_size: TileSize

    def visibility(self) -> dict[str, bool]:
        return {iu.unit.id: iu.visible for g in self.groups for iu in g}


def flatten(groups: Iterable[Sequence[ConcealableUnit]]) -> list[tuple[int, int, ConcealableUnit]]:
    """Assign global indices: returns (global_index, group_index, unit)."""
    out = []
    i = 0
    for g, group in enumerate(groups):
        for unit in group:
            out.append((i, g, unit))
            i += 1
    return out


def concealment_active(enabled: bool, round_active: bool) -> bool:
    return bool(enabled and round_active)


def is_visible(global_index: int, level: int, concealed: bool) -> bool:
    if not concealed:
        return True
    return global_index < max(level, 0)


def visibility(
    groups: Iterable[Sequence[ConcealableUnit]],
    level: int,
    enabled: bool,
    round_active: bool = True,
) -> dict[str, bool]:
    """Map unit id -> visible."""
    concealed = concealment_active(enabled, round_active)
    return {
        unit.id: is_visible(i, level, concealed)
        for i, _, unit in flatten(groups)
    }


def tile_size(total_units: int) -> TileSize:
    """Letter tile size tier; long answers get smaller tiles."""
    if total_units > 22:
        return TileSize.XS
    if total_units > 16:
        return TileSize.SM
    if total_units > 12:
        return TileSize.MD
    return TileSize.LG


def reveal_view(
    groups: Sequence[Sequence[ConcealableUnit]],
    level: int,
    enabled: bool,
    round_active: bool,
) -> RevealView:
    concealed = concealment_active(enabled, round_active)
    flat = flatten(groups)
    total = len(flat)

    rebuilt: list[list[IndexedUnit]] = [[] for _ in groups]
    for i, g, unit in flat:
        rebuilt[g].append(IndexedUnit(unit, g, i, is_visible(i, level, concealed)))

    revealed = min(max(level, 0), total) if concealed else total
    return RevealView(
        groups=tuple(tuple(g) for g in rebuilt),
        total_units=total,
        revealed_count=revealed,
        show_clue_hint=concealed and revealed < total,
        tile_size=tile_size(total),
    )


# ── Flag image overlay ───────────────────────────────────────────


@dataclass(frozen=True)
class RegionOverlay:
    """Fixed grid of regions over the flag image, row-major."""

    regions: tuple[bool, ...]  # True = covered
    show_clue_hint: bool

    @property
    def active(self) -> bool:
        return bool(self.regions)


def region_overlay(
    level: int, enabled: bool, round_active: bool, region_count: int = 16
) -> RegionOverlay:
    """Same index rule as letters, over ``region_count`` regions.

    No overlay at all (empty regions) outside an active hard-mode round.
    """
    if not concealment_active(enabled, round_active):
        return RegionOverlay(regions=(), show_clue_hint=False)
    covered = tuple(not is_visible(i, level, True) for i in range(region_count))
    return RegionOverlay(regions=covered, show_clue_hint=level < region_count)
