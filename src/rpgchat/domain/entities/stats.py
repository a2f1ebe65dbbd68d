"""Attribute models for the player character."""
from __future__ import annotations

from dataclasses import dataclass

STAT_NAMES: tuple[str, ...] = ("STR", "DEX", "END", "INT", "CHA", "LUCK")
STAT_FLOOR = 1
BASE_STAT_VALUE = 3


@dataclass(frozen=True, slots=True)
class Stats:
    """The six base attributes."""

    STR: int
    DEX: int
    END: int
    INT: int
    CHA: int
    LUCK: int

    @classmethod
    def uniform(cls, value: int = BASE_STAT_VALUE) -> Stats:
        return cls(*(value for _ in STAT_NAMES))

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in STAT_NAMES}
