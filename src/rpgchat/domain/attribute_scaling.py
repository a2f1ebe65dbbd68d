"""Attribute folding and derived-stat helpers."""
from __future__ import annotations

import math
from typing import Mapping

from rpgchat.domain.entities import STAT_FLOOR, STAT_NAMES, Stats

HP_BASE = 28
END_HP_PER_POINT = 4
MP_BASE = 12
INT_MP_PER_POINT = 3

XP_FIRST_THRESHOLD = 300
XP_GROWTH = 1.2
XP_ROUNDING = 10


def _require_stat(name: str) -> str:
    if name not in STAT_NAMES:
        raise ValueError(f"Unknown attribute '{name}'.")
    return name


def apply_bonuses(
    base: Stats,
    bonuses: Mapping[str, int] | None = None,
    penalties: Mapping[str, int] | None = None,
) -> Stats:
    """Add bonuses, subtract penalties, then floor every attribute at 1.

    Each attribute is an independent sum, so folding several bonus records
    gives the same result in any order as long as nothing hits the floor.
    """
    values = base.as_dict()
    for name, amount in (bonuses or {}).items():
        values[_require_stat(name)] += amount
    for name, amount in (penalties or {}).items():
        values[_require_stat(name)] -= amount
    return Stats(**{name: max(STAT_FLOOR, value) for name, value in values.items()})


def compute_xp_to_next(level: int) -> int:
    """Return the XP needed to leave ``level``.

    300 at level 1, compounding by 1.2 per level above it, rounded half-up to
    the nearest 10.
    """
    if level <= 1:
        return XP_FIRST_THRESHOLD
    threshold = float(XP_FIRST_THRESHOLD)
    for _ in range(1, level):
        threshold *= XP_GROWTH
    return int(math.floor(threshold / XP_ROUNDING + 0.5)) * XP_ROUNDING


def derive_hp_max(stats: Stats) -> int:
    return HP_BASE + stats.END * END_HP_PER_POINT


def derive_mp_max(stats: Stats) -> int:
    return MP_BASE + stats.INT * INT_MP_PER_POINT
