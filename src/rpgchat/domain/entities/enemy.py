"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Enemy:
    """An enemy currently engaged in combat."""

    enemy_id: str
    name: str
    hp_cur: int
    hp_max: int
    evasion: int
    defense: int
    attack_icons: tuple[str, ...]
    dmg_min: int
    dmg_max: int
    weak: str | None = None
    resist: str | None = None

    @property
    def is_alive(self) -> bool:
        return self.hp_cur > 0
