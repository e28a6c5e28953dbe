"""Top-N leaderboard selection. Lists arrive already ranked; never re-sorted."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

DEFAULT_TOP_N = 3


def top_n(entries: Sequence[T], n: int = DEFAULT_TOP_N) -> list[T]:
    if n <= 0:
        return []
    return list(entries[:n])
