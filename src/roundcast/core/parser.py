"""SnapshotParser — build a GameSnapshot from the game loop's JSON.

The raw JSON is validated against the packaged snapshot schema, but schema
violations only get flagged: the snapshot is still built, with bad or
missing fields replaced by neutral defaults. The overlay must keep
rendering even when the game loop sends something odd.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

import jsonschema

from roundcast.core.schemas import load_snapshot_schema
from roundcast.snapshot import (
    ConcealableUnit,
    ContestAction,
    ContestState,
    GameMode,
    GameSnapshot,
    GameStyle,
    KnockoutCategory,
    LeaderboardEntry,
    Match,
    Player,
    RoundContent,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one snapshot document."""

    success: bool
    snapshot: GameSnapshot | None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def clean(self) -> bool:
        return self.success and not self.errors


# ── Tolerant field coercion ──────────────────────────────────────

def _enum(cls: type[E], value: Any, default: E | None) -> E | None:
    if value is None:
        return default
    try:
        return cls(value)
    except ValueError:
        logger.debug("Unknown %s value %r", cls.__name__, value)
        return default


def _int(value: Any, default: int | None = 0) -> int | None:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def _float(value: Any, default: float | None = 0.0) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def _str(value: Any, default: str | None = None) -> str | None:
    return value if isinstance(value, str) else default


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _player(raw: Any) -> Player | None:
    raw = _dict(raw)
    pid = _str(raw.get("id"))
    if pid is None:
        return None
    return Player(
        id=pid,
        display_name=_str(raw.get("display_name"), ""),
        avatar_ref=_str(raw.get("avatar_ref")),
    )


def _match(raw: Any, fallback_id: str) -> Match:
    raw = _dict(raw)
    return Match(
        id=_str(raw.get("id"), fallback_id),
        player1=_player(raw.get("player1")),
        player2=_player(raw.get("player2")),
    )


def _units(raw: Any) -> tuple[tuple[ConcealableUnit, ...], ...]:
    groups = []
    for g, group in enumerate(_list(raw)):
        units = []
        for u, item in enumerate(_list(group)):
            item = _dict(item)
            units.append(ConcealableUnit(
                id=_str(item.get("id"), f"{g}-{u}"),
                value=_str(item.get("value"), ""),
            ))
        groups.append(tuple(units))
    return tuple(groups)


def _entries(raw: Any) -> tuple[LeaderboardEntry, ...]:
    out = []
    for item in _list(raw):
        item = _dict(item)
        uid = _str(item.get("user_id"))
        if uid is None:
            continue
        out.append(LeaderboardEntry(
            user_id=uid,
            display_name=_str(item.get("display_name"), ""),
            avatar_ref=_str(item.get("avatar_ref")),
            score=_int(item.get("score"), 0),
        ))
    return tuple(out)


def _content(raw: Any) -> RoundContent:
    raw = _dict(raw)
    return RoundContent(**{
        name: _str(raw.get(name))
        for name in RoundContent.__dataclass_fields__
    })


def _contest(raw: Any) -> ContestState:
    raw = _dict(raw)
    return ContestState(
        action=_enum(ContestAction, raw.get("action"), ContestAction.IDLE),
        attacker_id=_str(raw.get("attacker_id")),
        defender_id=_str(raw.get("defender_id")),
        ball_position=_float(raw.get("ball_position"), 50.0),
        commentary=_str(raw.get("commentary"), ""),
    )


def _points(raw: Any) -> tuple[int, int]:
    values = _list(raw)
    if len(values) != 2:
        return (0, 0)
    return (_int(values[0], 0), _int(values[1], 0))


def build_snapshot(raw: dict) -> GameSnapshot:
    """Build a snapshot from a decoded JSON object. Never raises on content."""
    raw = _dict(raw)

    bracket = None
    if isinstance(raw.get("bracket"), list):
        bracket = tuple(
            tuple(_match(m, f"r{r}-m{i}") for i, m in enumerate(_list(rnd)))
            for r, rnd in enumerate(raw["bracket"])
        )

    return GameSnapshot(
        style=_enum(GameStyle, raw.get("style"), GameStyle.CLASSIC),
        mode=_enum(GameMode, raw.get("mode"), None),
        round_active=raw.get("round_active") is True,
        hard_mode=raw.get("hard_mode") is True,
        reveal_level=max(_int(raw.get("reveal_level"), 0), 0),
        concealable_groups=_units(raw.get("concealable_groups")),
        content=_content(raw.get("content")),
        knockout_category=_enum(KnockoutCategory, raw.get("knockout_category"), None),
        bracket=bracket,
        current_round_index=_int(raw.get("current_round_index"), None),
        current_match_index=_int(raw.get("current_match_index"), None),
        knockout_players=tuple(
            p for p in (_player(x) for x in _list(raw.get("knockout_players"))) if p
        ),
        contest=_contest(raw.get("contest")),
        match_points=_points(raw.get("match_points")),
        round_elapsed=_float(raw.get("round_elapsed"), 0.0),
        round_total=_float(raw.get("round_total"), None),
        current_round=_int(raw.get("current_round"), 0),
        total_rounds=_int(raw.get("total_rounds"), 0),
        round_winners=_int(raw.get("round_winners"), 0),
        max_winners=_int(raw.get("max_winners"), 0),
        available_answers_count=_int(raw.get("available_answers_count"), None),
        gift_ranking=_entries(raw.get("gift_ranking")),
        like_ranking=_entries(raw.get("like_ranking")),
    )


class SnapshotParser:
    """Decode, validate (flag-only) and build snapshots."""

    def __init__(self, schema: dict | None = None) -> None:
        self._schema = schema if schema is not None else load_snapshot_schema()
        self._validator = jsonschema.Draft7Validator(self._schema)

    def validate(self, raw: Any) -> tuple[str, ...]:
        errors = []
        for err in sorted(self._validator.iter_errors(raw), key=lambda e: [str(p) for p in e.path]):
            where = "/".join(str(p) for p in err.path) or "<root>"
            errors.append(f"{where}: {err.message}")
        return tuple(errors)

    def parse_obj(self, raw: Any) -> ParseResult:
        if not isinstance(raw, dict):
            return ParseResult(
                success=False,
                snapshot=None,
                errors=("Snapshot JSON value is not an object",),
            )
        errors = self.validate(raw)
        for e in errors:
            logger.warning("Snapshot schema: %s", e)
        return ParseResult(success=True, snapshot=build_snapshot(raw), errors=errors)

    def parse(self, raw_text: str) -> ParseResult:
        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError as e:
            return ParseResult(
                success=False,
                snapshot=None,
                errors=(f"JSON parse error: {e}",),
            )
        return self.parse_obj(raw)
