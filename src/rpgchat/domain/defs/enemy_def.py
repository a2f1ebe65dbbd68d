"""Enemy template structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnemyDef:
    """Template used to spawn an enemy when combat starts."""

    id: str
    name: str
    hp: int
    evasion: int
    defense: int
    attack_icons: tuple[str, ...]
    dmg_min: int
    dmg_max: int
    weak: str | None = None
    resist: str | None = None
