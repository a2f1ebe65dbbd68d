"""Equipment runtime models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .item import ArmorItem, Item, WeaponItem


@dataclass(frozen=True, slots=True)
class Durability:
    cur: int
    max: int


@dataclass(frozen=True, slots=True)
class Equipment:
    """Equipped weapon, armor and accessories. Slots stay empty until assigned."""

    weapon: WeaponItem | None = None
    armor: ArmorItem | None = None
    accessories: tuple[Item, ...] = ()
    durability: Mapping[str, Durability] | None = None
